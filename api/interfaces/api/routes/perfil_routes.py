from typing import Any

from fastapi import APIRouter, Body, Depends

from api.application.dtos.perfil_dto import PerfilCriadoDTO, validar_entrada
from api.application.services.perfil_service import CriarPerfilService
from api.interfaces.api.dependencies import get_criar_perfil_service

router = APIRouter()


@router.post("/profile", response_model=PerfilCriadoDTO, status_code=201)
def criar_perfil(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    service: CriarPerfilService = Depends(get_criar_perfil_service),  # noqa: B008
) -> PerfilCriadoDTO:
    entrada = validar_entrada(payload)
    return PerfilCriadoDTO(data=service.executar(entrada))
