from fastapi import APIRouter, HTTPException, status

from caesarlab.core.exceptions import TextTooLongError
from caesarlab.dependencies import EngineDep, SettingsDep
from caesarlab.models.schemas import BruteForceRequest, BruteForceResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=BruteForceResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Brute force ciphertext",
    description="Decrypt under every key from 1 to 32 and return all candidates.",
)
async def brute_force_ciphertext(
    request: BruteForceRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> BruteForceResponse:
    """Return the decryption under each key, in ascending key order."""
    if len(request.text) > settings.max_text_length:
        error = TextTooLongError(len(request.text), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )

    return BruteForceResponse(candidates=engine.brute_force(request.text))
