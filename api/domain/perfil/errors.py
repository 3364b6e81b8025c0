"""Domain exceptions for profile creation.

Raised by the validator, the address resolver and the repository. The API
layer catches PerfilError and renders it as the JSON error envelope using
``status`` as the HTTP status and ``code`` as the internal step identifier.
"""

from __future__ import annotations


class PerfilError(Exception):
    """Base exception for every profile creation failure."""

    status: int = 500
    code: str = "internal.error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class DocumentError(PerfilError):
    """CPF/CNPJ missing or with invalid check digits."""

    status = 400
    code = "create-profile.validateDocument"


class AddressLookupError(PerfilError):
    """CEP lookup unreachable, timed out or CEP not found."""

    status = 400
    code = "create-profile.getAddress"


class AddressMismatchError(PerfilError):
    """Caller city/state disagrees with the resolved address."""

    status = 400
    code = "create-profile.validateAddress"


class ConflictError(PerfilError):
    """Unique field (email, cpf, cnpj, cellphone) already taken."""

    status = 409
    code = "profile-repository.createProfile"


class StoreError(PerfilError):
    """Any non-conflict failure while persisting."""

    status = 500
    code = "profile-repository.createProfile"


class ServiceError(PerfilError):
    """Catch-all wrapper for unexpected failures in the orchestrator."""

    status = 500
    code = "profile-service.createProfile"


class RequestValidationFailed(PerfilError):
    """Structural validation of the request body failed."""

    status = 400
    code = "bad.request"

    def __init__(self, mensagens: list[str]) -> None:
        super().__init__(", ".join(mensagens))
        self.mensagens = mensagens
