from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from verification_service.application.static_codes import (
    StaticVerificationCodeManager,
    verify_static_code,
)
from verification_service.domain.errors import InvalidStaticCode, StaticCodeUnavailable
from verification_service.presentation.dependencies import get_static_code_manager
from verification_service.schemas.requests import StaticCodeVerifyIn
from verification_service.schemas.responses import StaticCodeVerifiedOut

router = APIRouter(prefix="/static-codes", tags=["Static codes"])


@router.post("/verify", response_model=StaticCodeVerifiedOut)
async def post_verify_static_code(
    body: StaticCodeVerifyIn,
    manager: Annotated[
        StaticVerificationCodeManager, Depends(get_static_code_manager)
    ],
):
    try:
        outcome = await verify_static_code(
            manager=manager,
            phone_number=body.phone_number,
            code=body.code,
        )
    except InvalidStaticCode:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid verification code",
        )
    except StaticCodeUnavailable:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="verification store unavailable",
        )

    return StaticCodeVerifiedOut(outcome=outcome.value)
