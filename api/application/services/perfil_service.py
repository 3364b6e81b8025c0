from __future__ import annotations

import logging

from api.domain.perfil.entities import NovoEndereco, NovoPerfil
from api.domain.perfil.errors import DocumentError, PerfilError, ServiceError
from api.domain.perfil.repository import PerfilRepository, ResolvedorEndereco
from api.domain.perfil.services import (
    EnderecoFornecido,
    campo_com_fallback,
    reconciliar_endereco,
)
from api.domain.perfil.value_objects import CNPJ, CPF

from ..dtos.perfil_dto import CriarPerfilRequest, PerfilResponseDTO

logger = logging.getLogger(__name__)


def validar_documento(
    cpf: str | None, cnpj: str | None
) -> tuple[CPF | None, CNPJ | None]:
    """Exige CPF ou CNPJ; o que vier informado precisa ter digitos verificadores validos."""
    if not cpf and not cnpj:
        raise DocumentError("missing CPF or CNPJ")
    try:
        return (CPF(cpf) if cpf else None, CNPJ(cnpj) if cnpj else None)
    except ValueError as err:
        raise DocumentError(str(err)) from err


def _documento_para_log(cpf: CPF | None, cnpj: CNPJ | None) -> str:
    partes = []
    if cpf is not None:
        partes.append(f"cpf={cpf}")
    if cnpj is not None:
        partes.append(f"cnpj={cnpj}")
    return " ".join(partes)


class CriarPerfilService:
    """Imperative Shell: documento -> CEP -> reconciliacao -> gravacao -> resposta."""

    def __init__(
        self,
        perfil_repo: PerfilRepository,
        resolvedor: ResolvedorEndereco,
    ) -> None:
        self._perfil_repo = perfil_repo
        self._resolvedor = resolvedor

    def executar(self, entrada: CriarPerfilRequest) -> PerfilResponseDTO:
        """Cria perfil + endereco.

        Erros de dominio (PerfilError) passam sem alteracao; qualquer outra
        excecao vira ServiceError com a mensagem original.
        """
        try:
            return self._executar(entrada)
        except PerfilError:
            raise
        except Exception as err:
            logger.exception("falha inesperada ao criar perfil")
            raise ServiceError(
                f"failed to create profile: {str(err) or type(err).__name__}"
            ) from err

    def _executar(self, entrada: CriarPerfilRequest) -> PerfilResponseDTO:
        cpf, cnpj = validar_documento(entrada.cpf, entrada.cnpj)
        logger.info(
            "criando perfil %s cep=%s",
            _documento_para_log(cpf, cnpj),
            entrada.zip_code,
        )

        resolvido = self._resolvedor.resolver(entrada.zip_code)
        reconciliar_endereco(
            EnderecoFornecido(city=entrada.city, state=entrada.state),
            resolvido,
        )

        novo = NovoPerfil(
            cpf=cpf.valor if cpf else None,
            cnpj=cnpj.valor if cnpj else None,
            name=entrada.name,
            cellphone=entrada.cellphone,
            phone=entrada.phone or None,
            email=entrada.email,
            endereco=NovoEndereco(
                zipcode=entrada.zip_code,
                street=campo_com_fallback(resolvido.street, entrada.street),
                number=entrada.number,
                complement=entrada.complement or None,
                neighborhood=campo_com_fallback(resolvido.neighborhood, entrada.neighborhood),
                city=campo_com_fallback(resolvido.city, entrada.city),
                state=campo_com_fallback(resolvido.state, entrada.state),
            ),
        )

        perfil = self._perfil_repo.criar_perfil(novo)
        return PerfilResponseDTO.from_domain(perfil)
