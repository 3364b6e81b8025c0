from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.application.dtos.perfil_dto import mensagens_de_erro
from api.domain.perfil.errors import PerfilError, RequestValidationFailed

logger = logging.getLogger(__name__)


def envelope_erro(message: str, code: str, status_code: int) -> JSONResponse:
    """{"error": {message, code, status: true}, "data": {}} com o status HTTP do erro."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {"message": message, "code": code, "status": True},
            "data": {},
        },
    )


async def perfil_error_handler(request: Request, exc: PerfilError) -> JSONResponse:
    if exc.status >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return envelope_erro(exc.message, exc.code, exc.status)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    erro = RequestValidationFailed(mensagens_de_erro(list(exc.errors())))
    return envelope_erro(erro.message, erro.code, erro.status)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Nunca expor stack trace ao cliente.
    logger.exception("erro nao tratado em %s %s", request.method, request.url.path)
    return envelope_erro("internal server error", "internal.error", 500)


def registrar_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PerfilError, perfil_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
