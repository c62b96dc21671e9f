from typing import Optional, Protocol

from verification_service.domain.entities import VerificationRecord


class StaticCodeStorePort(Protocol):
    async def get(self, phone_number: str) -> Optional[VerificationRecord]:
        """
        Point lookup by phone number.
        Return None if there is no record or the record has no code.
        Raise StoreUnavailable on transport/driver failure.
        """

    async def put(self, record: VerificationRecord) -> None:
        """Unconditionally create or overwrite the record."""

    async def put_if_absent(
        self, record: VerificationRecord
    ) -> tuple[VerificationRecord, bool]:
        """
        Atomically store `record` unless a record already exists for its
        phone number. Return whichever record is stored after the call and
        True only if this call created it.
        """

    async def delete(self, phone_number: str) -> None:
        """Remove the record, if any."""
