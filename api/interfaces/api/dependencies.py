from fastapi import Depends

from api.application.services.perfil_service import CriarPerfilService
from api.domain.perfil.repository import ResolvedorEndereco
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_perfil_repo import DuckDBPerfilRepo
from api.infrastructure.viacep_client import ViaCepClient


def get_resolvedor() -> ResolvedorEndereco:
    settings = get_settings()
    return ViaCepClient(base_url=settings.viacep_url, timeout=settings.viacep_timeout)


def get_perfil_repo() -> DuckDBPerfilRepo:
    return DuckDBPerfilRepo(get_connection())


def get_criar_perfil_service(
    resolvedor: ResolvedorEndereco = Depends(get_resolvedor),  # noqa: B008
    perfil_repo: DuckDBPerfilRepo = Depends(get_perfil_repo),  # noqa: B008
) -> CriarPerfilService:
    return CriarPerfilService(perfil_repo=perfil_repo, resolvedor=resolvedor)
