import logging

from fastapi import APIRouter, HTTPException, status

from caesarlab.core.exceptions import TextTooLongError, ValidationError
from caesarlab.dependencies import EngineDep, SettingsDep
from caesarlab.models.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from caesarlab.services.analysis import frequency

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Frequency analysis",
    description=(
        "Score keys 0-32 by the log-likelihood of the decrypted letter counts "
        "under a frequency table and return the best key."
    ),
)
async def analyze_ciphertext(
    request: AnalyzeRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> AnalyzeResponse:
    """
    Infer the Caesar key by frequency analysis.

    Custom ``frequencies`` take precedence over the built-in table of
    ``language``; with neither, the language is detected from the text.
    """
    if len(request.text) > settings.max_text_length:
        error = TextTooLongError(len(request.text), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )

    try:
        language = None
        if request.frequencies is not None:
            table = request.frequencies
        else:
            language = (
                request.language
                or settings.default_language
                or frequency.detect_language(request.text)
            )
            table = frequency.reference_table(language)

        best_key = frequency.statistical_analysis(request.text, table)

        return AnalyzeResponse(
            best_key=best_key,
            plaintext=engine.decrypt(request.text, best_key),
            language=language,
            scores=frequency.rank_keys(request.text, table),
        )

    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.warning("Analysis failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )
