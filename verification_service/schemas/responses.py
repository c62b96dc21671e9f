from typing import Literal

from pydantic import BaseModel, Field


class StaticCodeVerifiedOut(BaseModel):
    status: Literal["ok"] = "ok"
    outcome: Literal["created", "matched"] = Field(
        ..., description="created on first use, matched afterwards"
    )
