"""
HTTP routes for key generation, encryption and decryption.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from email_pgp.api.schemas import (
    DecryptRequest,
    DecryptResponse,
    EncryptRequest,
    EncryptResponse,
    ErrorResponse,
    GenerateKeysRequest,
    GenerateKeysResponse,
    HealthResponse,
)
from email_pgp.services.pgp_service import (
    DECRYPT_REQUIRED,
    ENCRYPT_REQUIRED,
    GENERATE_KEYS_REQUIRED,
    PgpService,
)

GENERATE_KEYS_PATH = "/api/generate-keys"
ENCRYPT_PATH = "/api/encrypt"
DECRYPT_PATH = "/api/decrypt"

# Used when the body cannot be parsed into the request model at all.
INVALID_INPUT_MESSAGES = {
    GENERATE_KEYS_PATH: GENERATE_KEYS_REQUIRED,
    ENCRYPT_PATH: ENCRYPT_REQUIRED,
    DECRYPT_PATH: DECRYPT_REQUIRED,
}

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

router = APIRouter()


def get_pgp_service(request: Request) -> PgpService:
    return request.app.state.pgp_service


ServiceDep = Annotated[PgpService, Depends(get_pgp_service)]


@router.post(GENERATE_KEYS_PATH, response_model=GenerateKeysResponse, responses=_ERROR_RESPONSES)
async def generate_keys(payload: GenerateKeysRequest, service: ServiceDep) -> GenerateKeysResponse:
    pair = await service.generate_keys(payload.name, payload.email, payload.passphrase)
    return GenerateKeysResponse(private_key=pair.private_key, public_key=pair.public_key)


@router.post(ENCRYPT_PATH, response_model=EncryptResponse, responses=_ERROR_RESPONSES)
async def encrypt(payload: EncryptRequest, service: ServiceDep) -> EncryptResponse:
    encrypted = await service.encrypt(payload.message, payload.public_key_armored)
    return EncryptResponse(encrypted_message=encrypted.armored)


@router.post(DECRYPT_PATH, response_model=DecryptResponse, responses=_ERROR_RESPONSES)
async def decrypt(payload: DecryptRequest, service: ServiceDep) -> DecryptResponse:
    decrypted = await service.decrypt(
        payload.encrypted_message, payload.private_key_armored, payload.passphrase
    )
    return DecryptResponse(decrypted_message=decrypted.text)


@router.get("/api/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
