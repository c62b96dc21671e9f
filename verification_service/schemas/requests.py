from pydantic import BaseModel, Field


class StaticCodeVerifyIn(BaseModel):
    phone_number: str = Field(
        ..., description="E.164 phone number, validated upstream", min_length=1
    )
    code: str = Field(..., description="The submitted verification code", min_length=1)
