from fastapi import APIRouter

from caesarlab.api.v1.endpoints import analyze, brute_force, decrypt, encrypt

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    brute_force.router,
    prefix="/brute-force",
    tags=["Analysis"],
)

api_router.include_router(
    analyze.router,
    prefix="/analyze",
    tags=["Analysis"],
)
