"""
Request and response bodies.

Fields are snake_case in Python and camelCase on the wire. Request fields
are all optional here; presence is checked by the service so that a missing
field yields the operation's own 400 message. Request bodies accept only
the camelCase names; snake_case keys are ignored and count as missing.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateKeysRequest(_CamelRequest):
    name: str | None = None
    email: str | None = None
    passphrase: str | None = None


class GenerateKeysResponse(_CamelResponse):
    private_key: str
    public_key: str


class EncryptRequest(_CamelRequest):
    message: str | None = None
    public_key_armored: str | None = None


class EncryptResponse(_CamelResponse):
    encrypted_message: str


class DecryptRequest(_CamelRequest):
    encrypted_message: str | None = None
    private_key_armored: str | None = None
    passphrase: str | None = None


class DecryptResponse(_CamelResponse):
    decrypted_message: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
