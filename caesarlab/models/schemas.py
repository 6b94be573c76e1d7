from enum import Enum

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class Script(str, Enum):
    """Writing systems known to the cipher."""

    ENGLISH = "english"
    RUSSIAN = "russian"
    NONE = "none"  # Not a registered letter, passed through unchanged


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"


# ============================================================================
# Analysis Schemas
# ============================================================================


class BruteForceCandidate(BaseModel):
    """Decryption under one tried key."""

    key: int
    plaintext: str


class KeyScore(BaseModel):
    """Log-likelihood score of a single scanned key."""

    key: int
    score: float


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    text: str
    key: int | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    text: str
    key: int | None = None
    language: Script | None = None


class BruteForceRequest(BaseModel):
    """Request schema for /brute-force endpoint."""

    text: str


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    text: str
    frequencies: dict[str, float] | None = None
    language: Script | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    text: str
    key_used: int


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    key_used: int
    confidence: float
    explanation: str


class BruteForceResponse(BaseModel):
    """Response schema for /brute-force endpoint."""

    candidates: list[BruteForceCandidate]


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    best_key: int
    plaintext: str
    language: Script | None = None
    scores: list[KeyScore]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict = Field(default_factory=dict)
