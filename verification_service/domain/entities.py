from dataclasses import dataclass
from enum import Enum

KEY_PHONE_NUMBER = "phone_number"
ATTR_VERIFICATION_CODE = "verification_code"
ATTR_CREATED_AT = "created_at"
ATTR_UPDATED_AT = "updated_at"


@dataclass(frozen=True)
class VerificationRecord:
    phone_number: str
    verification_code: str
    created_at: int
    # never refreshed after creation
    updated_at: int

    def __post_init__(self):
        if not isinstance(self.phone_number, str):
            raise TypeError("phone_number must be a string")
        if not isinstance(self.verification_code, str):
            raise TypeError("verification_code must be a string")

    @classmethod
    def new(cls, phone_number: str, code: str, now: int) -> "VerificationRecord":
        return cls(
            phone_number=phone_number,
            verification_code=code,
            created_at=now,
            updated_at=now,
        )


class VerificationOutcome(str, Enum):
    CREATED = "created"
    MATCHED = "matched"
    MISMATCHED = "mismatched"
    UNAVAILABLE = "unavailable"

    @property
    def accepted(self) -> bool:
        return self in (VerificationOutcome.CREATED, VerificationOutcome.MATCHED)
