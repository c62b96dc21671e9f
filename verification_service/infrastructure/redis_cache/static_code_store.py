from __future__ import annotations

from typing import Mapping, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from verification_service.domain.entities import (
    ATTR_CREATED_AT,
    ATTR_UPDATED_AT,
    ATTR_VERIFICATION_CODE,
    KEY_PHONE_NUMBER,
    VerificationRecord,
)
from verification_service.domain.errors import StoreUnavailable
from verification_service.domain.ports.static_code_store import StaticCodeStorePort


_LUA_PUT_IF_ABSENT = """
-- KEYS[1]: static code key
-- ARGV[1]: phone number, ARGV[2]: code, ARGV[3]: created_at, ARGV[4]: updated_at
local key = KEYS[1]
local cur = redis.call('HMGET', key, 'verification_code', 'created_at', 'updated_at')
if cur[1] then
  return {0, cur[1], cur[2], cur[3]}
end
redis.call('HSET', key,
  'phone_number', ARGV[1],
  'verification_code', ARGV[2],
  'created_at', ARGV[3],
  'updated_at', ARGV[4])
return {1, ARGV[2], ARGV[3], ARGV[4]}
"""


def _to_int(value: Optional[str]) -> int:
    return int(value) if value is not None else 0


class RedisStaticCodeStore(StaticCodeStorePort):
    """
    One Redis hash per phone number:
        <prefix><phone_number> -> {phone_number, verification_code, created_at, updated_at}
    Timestamps are epoch seconds stored as decimal strings.
    Expects a client created with decode_responses=True.
    """

    def __init__(self, redis: Redis, *, key_prefix: str = "static_code:") -> None:
        self._redis = redis
        self._prefix = key_prefix

    def _key(self, phone_number: str) -> str:
        return f"{self._prefix}{phone_number}"

    def _to_record(
        self, phone_number: str, stored: Mapping[str, str]
    ) -> Optional[VerificationRecord]:
        code = stored.get(ATTR_VERIFICATION_CODE)
        if code is None:
            return None
        try:
            return VerificationRecord(
                phone_number=phone_number,
                verification_code=code,
                created_at=_to_int(stored.get(ATTR_CREATED_AT)),
                updated_at=_to_int(stored.get(ATTR_UPDATED_AT)),
            )
        except ValueError as e:
            raise StoreUnavailable(f"malformed static code record: {e}") from e

    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        try:
            stored = await self._redis.hgetall(self._key(phone_number))
        except (RedisError, UnicodeDecodeError) as e:
            raise StoreUnavailable(str(e)) from e
        if not stored:
            return None
        return self._to_record(phone_number, stored)

    async def put(self, record: VerificationRecord) -> None:
        key = self._key(record.phone_number)
        try:
            pipe = self._redis.pipeline(transaction=True)
            pipe.delete(key)
            pipe.hset(
                key,
                mapping={
                    KEY_PHONE_NUMBER: record.phone_number,
                    ATTR_VERIFICATION_CODE: record.verification_code,
                    ATTR_CREATED_AT: str(record.created_at),
                    ATTR_UPDATED_AT: str(record.updated_at),
                },
            )
            await pipe.execute()
        except RedisError as e:
            raise StoreUnavailable(str(e)) from e

    async def put_if_absent(
        self, record: VerificationRecord
    ) -> tuple[VerificationRecord, bool]:
        try:
            res = await self._redis.eval(
                _LUA_PUT_IF_ABSENT,
                1,
                self._key(record.phone_number),
                record.phone_number,
                record.verification_code,
                str(record.created_at),
                str(record.updated_at),
            )
        except (RedisError, UnicodeDecodeError) as e:
            raise StoreUnavailable(str(e)) from e

        try:
            created, code, created_at, updated_at = res
        except (TypeError, ValueError) as e:
            raise StoreUnavailable(f"unexpected put_if_absent reply: {res!r}") from e
        stored = self._to_record(
            record.phone_number,
            {
                ATTR_VERIFICATION_CODE: code,
                ATTR_CREATED_AT: created_at,
                ATTR_UPDATED_AT: updated_at,
            },
        )
        if stored is None:
            raise StoreUnavailable("put_if_absent returned no code")
        return stored, int(created) == 1

    async def delete(self, phone_number: str) -> None:
        try:
            await self._redis.delete(self._key(phone_number))
        except RedisError as e:
            raise StoreUnavailable(str(e)) from e
