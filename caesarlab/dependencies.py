from typing import Annotated

from fastapi import Depends, HTTPException, status

from caesarlab.core.config import Settings, get_settings
from caesarlab.models.schemas import CipherType
from caesarlab.services.engines.base import CipherEngine
from caesarlab.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Engine dependency
def get_caesar_engine() -> CipherEngine:
    """Get the registered Caesar engine."""
    engine = EngineRegistry().get_engine(CipherType.CAESAR)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cipher type '{CipherType.CAESAR.value}' is not supported",
        )
    return engine

EngineDep = Annotated[CipherEngine, Depends(get_caesar_engine)]
