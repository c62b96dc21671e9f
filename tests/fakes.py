import asyncio
from typing import Optional

from verification_service.domain.entities import VerificationRecord
from verification_service.domain.errors import StoreUnavailable

NOW = 1_700_000_000


class FakeStaticCodeStore:
    def __init__(self) -> None:
        self.records: dict[str, VerificationRecord] = {}
        self.puts: list[VerificationRecord] = []

    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        return self.records.get(phone_number)

    async def put(self, record: VerificationRecord) -> None:
        self.puts.append(record)
        self.records[record.phone_number] = record

    async def put_if_absent(
        self, record: VerificationRecord
    ) -> tuple[VerificationRecord, bool]:
        self.puts.append(record)
        if record.phone_number in self.records:
            return self.records[record.phone_number], False
        self.records[record.phone_number] = record
        return record, True

    async def delete(self, phone_number: str) -> None:
        self.records.pop(phone_number, None)


class FakeErroredStaticCodeStore(FakeStaticCodeStore):
    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        raise StoreUnavailable("Redis down")


class FakeWriteFailingStaticCodeStore(FakeStaticCodeStore):
    async def put_if_absent(
        self, record: VerificationRecord
    ) -> tuple[VerificationRecord, bool]:
        raise StoreUnavailable("Redis down")


class FakeBrokenStaticCodeStore(FakeStaticCodeStore):
    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        raise RuntimeError("boom")


class FakeRacingStaticCodeStore(FakeStaticCodeStore):
    """Lookup misses, but another writer pins `winner` before our write lands."""

    def __init__(self, winner: VerificationRecord) -> None:
        super().__init__()
        self.winner = winner

    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        return None

    async def put_if_absent(
        self, record: VerificationRecord
    ) -> tuple[VerificationRecord, bool]:
        self.records.setdefault(self.winner.phone_number, self.winner)
        return await super().put_if_absent(record)


class FakeYieldingStaticCodeStore(FakeStaticCodeStore):
    """Gives up control after each lookup so concurrent callers interleave."""

    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        record = self.records.get(phone_number)
        await asyncio.sleep(0)
        return record
