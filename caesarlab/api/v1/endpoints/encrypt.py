import logging

from fastapi import APIRouter, HTTPException, status

from caesarlab.core.exceptions import TextTooLongError
from caesarlab.dependencies import EngineDep, SettingsDep
from caesarlab.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Encrypt English and Russian letters with a Caesar shift. Other characters are kept.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a Caesar shift.

    A random key in 1-32 is generated when none is given.
    """
    if len(request.text) > settings.max_text_length:
        error = TextTooLongError(len(request.text), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )

    key = request.key
    if key is None:
        key = engine.generate_random_key()

    logger.info("Encrypting %d chars", len(request.text))

    return EncryptResponse(
        text=engine.encrypt(request.text, key),
        key_used=key,
    )
