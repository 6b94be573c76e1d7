import logging

from fastapi import APIRouter, HTTPException, status

from caesarlab.core.exceptions import TextTooLongError, ValidationError
from caesarlab.dependencies import EngineDep, SettingsDep
from caesarlab.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt Caesar ciphertext with a known key, or find the key by frequency analysis.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext.

    If no key is provided, the engine scores keys 0-32 against the
    reference frequencies of ``language`` (detected when omitted).
    """
    if len(request.text) > settings.max_text_length:
        error = TextTooLongError(len(request.text), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )

    try:
        if request.key is not None:
            result = engine.decrypt_with_key(request.text, request.key)
        else:
            result = engine.find_key_and_decrypt(
                request.text,
                request.language or settings.default_language,
            )

        return DecryptResponse(
            plaintext=result.plaintext,
            key_used=result.key,
            confidence=result.confidence,
            explanation=result.explanation,
        )

    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.warning("Decryption failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
