from __future__ import annotations

import logging
from typing import Callable, Optional

from verification_service.domain import services as domain_services
from verification_service.domain.entities import VerificationOutcome, VerificationRecord
from verification_service.domain.errors import (
    InvalidStaticCode,
    StaticCodeUnavailable,
    StoreUnavailable,
)
from verification_service.domain.ports.static_code_store import StaticCodeStorePort

logger = logging.getLogger(__name__)


class StaticVerificationCodeManager:
    """
    Pins a verification code to a phone number on first use.

    The first code submitted for a phone number becomes canonical; every later
    submission must equal it exactly. Records are never updated or deleted here.
    """

    def __init__(
        self,
        store: StaticCodeStorePort,
        *,
        clock: Callable[[], int] = domain_services.epoch_seconds,
    ) -> None:
        self._store = store
        self._clock = clock

    async def lookup_code(self, phone_number: str) -> Optional[str]:
        """Stored code for `phone_number`, or None. Raises StoreUnavailable."""
        record = await self._store.get(phone_number)
        return record.verification_code if record is not None else None

    async def get_stored_code(self, phone_number: str) -> Optional[str]:
        """Stored code for `phone_number`; store failures are logged and read as None."""
        try:
            return await self.lookup_code(phone_number)
        except StoreUnavailable:
            logger.error(
                "error retrieving static verification code",
                extra={"phone_number": phone_number},
                exc_info=True,
            )
            return None
        except Exception:
            logger.exception(
                "unexpected error retrieving static verification code",
                extra={"phone_number": phone_number},
            )
            return None

    async def verify(self, phone_number: str, code: str) -> VerificationOutcome:
        try:
            stored_code = await self.lookup_code(phone_number)
            if stored_code is None:
                return await self._create(phone_number, code)
            return self._compare(phone_number, stored_code, code)
        except StoreUnavailable:
            logger.error(
                "error verifying static verification code",
                extra={"phone_number": phone_number},
                exc_info=True,
            )
            return VerificationOutcome.UNAVAILABLE
        except Exception:
            logger.exception(
                "unexpected error verifying static verification code",
                extra={"phone_number": phone_number},
            )
            return VerificationOutcome.UNAVAILABLE

    async def verify_and_store(self, phone_number: str, code: str) -> bool:
        """
        True on first use (the code gets stored) or when `code` matches the
        stored one; False on mismatch or when the store fails.
        """
        outcome = await self.verify(phone_number, code)
        return outcome.accepted

    async def _create(self, phone_number: str, code: str) -> VerificationOutcome:
        record = VerificationRecord.new(phone_number, code, self._clock())
        stored, created = await self._store.put_if_absent(record)
        if created:
            logger.info(
                "created static verification code record",
                extra={"phone_number": phone_number},
            )
            return VerificationOutcome.CREATED
        # another request pinned a code between our lookup and write
        return self._compare(phone_number, stored.verification_code, code)

    def _compare(
        self, phone_number: str, stored_code: str, code: str
    ) -> VerificationOutcome:
        if domain_services.secure_compare(stored_code, code):
            logger.debug(
                "static verification code matched",
                extra={"phone_number": phone_number},
            )
            return VerificationOutcome.MATCHED
        logger.warning(
            "static verification code mismatch",
            extra={"phone_number": phone_number},
        )
        return VerificationOutcome.MISMATCHED


async def verify_static_code(
    manager: StaticVerificationCodeManager,
    phone_number: str,
    code: str,
) -> VerificationOutcome:
    outcome = await manager.verify(phone_number, code)
    if outcome is VerificationOutcome.UNAVAILABLE:
        raise StaticCodeUnavailable()
    if not outcome.accepted:
        raise InvalidStaticCode()
    return outcome
