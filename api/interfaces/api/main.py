from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.error_handlers import registrar_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import close_connection, get_connection
    from api.infrastructure.log import configure_logging

    configure_logging(get_settings().log_level)
    get_connection()  # cria schema no startup
    yield
    close_connection()


app = FastAPI(
    title="Cadastro de Perfil API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    allow_credentials=True,
)

registrar_handlers(app)

from api.interfaces.api.routes.health_routes import router as health_router  # noqa: E402
from api.interfaces.api.routes.perfil_routes import router as perfil_router  # noqa: E402

app.include_router(health_router, prefix="/api")
app.include_router(perfil_router, prefix="/api")
