from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email
from pydantic_core import ErrorDetails, PydanticCustomError

from api.domain.perfil.entities import Endereco, Perfil
from api.domain.perfil.errors import RequestValidationFailed
from api.domain.perfil.value_objects import somente_digitos

_CELULAR = re.compile(r"^\d{2}9\d{8}$")
_FIXO = re.compile(r"^\d{2}[2-5]\d{7}$")
_UF = re.compile(r"^[A-Za-z]{2}$")


def _exigir(valor: str, mensagem: str) -> str:
    if not valor.strip():
        raise ValueError(mensagem)
    return valor.strip()


class CriarPerfilRequest(BaseModel):
    """Entrada de criacao de perfil. Campos em camelCase no JSON (zipCode, emailConfirmation)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    cpf: str | None = None
    cnpj: str | None = None
    name: str
    cellphone: str
    phone: str | None = None
    email: str
    email_confirmation: str
    zip_code: str
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str

    @field_validator("cpf", "cnpj", "cellphone", "phone", "zip_code", mode="before")
    @classmethod
    def _remover_mascara(cls, v: Any) -> Any:
        return somente_digitos(v) if isinstance(v, str) else v

    @field_validator("email", "email_confirmation", mode="before")
    @classmethod
    def _normalizar_email(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("cpf")
    @classmethod
    def _cpf_formato(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 11:
            raise ValueError("CPF must have 11 digits")
        return v

    @field_validator("cnpj")
    @classmethod
    def _cnpj_formato(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 14:
            raise ValueError("CNPJ must have 14 digits")
        return v

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return _exigir(v, "Name is required")

    @field_validator("cellphone")
    @classmethod
    def _cellphone(cls, v: str) -> str:
        if not _CELULAR.match(v):
            raise ValueError(
                "Cellphone must be a valid Brazilian cellphone (11 digits: DD9XXXXXXXX)"
            )
        return v

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str | None) -> str | None:
        if v is not None and not _FIXO.match(v):
            raise ValueError("Phone must be a valid Brazilian landline (10 digits: DDXXXXXXXX)")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return _email_valido(v, "Email")

    @field_validator("email_confirmation")
    @classmethod
    def _email_confirmation(cls, v: str) -> str:
        return _email_valido(v, "Email confirmation")

    @field_validator("zip_code")
    @classmethod
    def _zip_code(cls, v: str) -> str:
        if len(v) != 8:
            raise ValueError("CEP must be a valid postal code")
        return v

    @field_validator("street")
    @classmethod
    def _street(cls, v: str) -> str:
        return _exigir(v, "Street (logradouro) is required")

    @field_validator("number")
    @classmethod
    def _number(cls, v: str) -> str:
        return _exigir(v, "Number is required")

    @field_validator("neighborhood")
    @classmethod
    def _neighborhood(cls, v: str) -> str:
        return _exigir(v, "Neighborhood (bairro) is required")

    @field_validator("city")
    @classmethod
    def _city(cls, v: str) -> str:
        return _exigir(v, "City is required")

    @field_validator("state")
    @classmethod
    def _state(cls, v: str) -> str:
        if not _UF.match(v.strip()):
            raise ValueError("State must have 2 characters (e.g., SP, RJ)")
        return v.strip().upper()

    @model_validator(mode="after")
    def _confirmacao_email(self) -> CriarPerfilRequest:
        if self.email != self.email_confirmation:
            raise ValueError("emailConfirmation must match email field.")
        return self


def _email_valido(valor: str, rotulo: str) -> str:
    if not valor:
        raise ValueError(f"{rotulo} is required")
    try:
        _, endereco = validate_email(valor)
    except PydanticCustomError as err:
        raise ValueError(f"{rotulo} must be valid") from err
    # validate_email aceita "Nome <addr>"; so o endereco puro e valido aqui.
    if endereco.lower() != valor:
        raise ValueError(f"{rotulo} must be valid")
    return valor


def mensagens_de_erro(erros: list[ErrorDetails] | list[dict[str, Any]]) -> list[str]:
    """Converte erros do pydantic em mensagens legiveis, uma por campo."""
    mensagens: list[str] = []
    for erro in erros:
        loc = [str(p) for p in erro.get("loc", ()) if p != "body"]
        campo = loc[-1] if loc else ""
        tipo = erro.get("type", "")
        msg = str(erro.get("msg", ""))
        if tipo == "missing":
            texto = f"{campo} is required"
        elif tipo == "extra_forbidden":
            texto = f"property {campo} should not exist"
        elif tipo == "value_error":
            texto = msg.removeprefix("Value error, ")
        elif campo:
            texto = f"{campo}: {msg}"
        else:
            texto = msg
        if texto not in mensagens:
            mensagens.append(texto)
    return mensagens


def validar_entrada(payload: Any) -> CriarPerfilRequest:
    """Validacao estrutural explicita do corpo da requisicao.

    Raises:
        RequestValidationFailed: lista de mensagens por campo.
    """
    try:
        return CriarPerfilRequest.model_validate(payload)
    except ValidationError as err:
        raise RequestValidationFailed(mensagens_de_erro(err.errors())) from err


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnderecoResponseDTO(_CamelModel):
    id: str
    profile_id: str
    zipcode: str
    street: str
    number: str
    complement: str | None
    neighborhood: str
    city: str
    state: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, endereco: Endereco) -> EnderecoResponseDTO:
        return cls(
            id=endereco.id,
            profile_id=endereco.perfil_id,
            zipcode=endereco.zipcode,
            street=endereco.street,
            number=endereco.number,
            complement=endereco.complement or None,
            neighborhood=endereco.neighborhood,
            city=endereco.city,
            state=endereco.state,
            created_at=endereco.criado_em.isoformat(),
            updated_at=endereco.atualizado_em.isoformat(),
        )


class PerfilResponseDTO(_CamelModel):
    id: str
    cnpj: str | None
    cpf: str | None
    name: str
    cellphone: str
    phone: str | None
    email: str
    created_at: str
    updated_at: str
    address: EnderecoResponseDTO

    @classmethod
    def from_domain(cls, perfil: Perfil) -> PerfilResponseDTO:
        return cls(
            id=perfil.id,
            cnpj=perfil.cnpj or None,
            cpf=perfil.cpf or None,
            name=perfil.name,
            cellphone=perfil.cellphone,
            phone=perfil.phone or None,
            email=perfil.email,
            created_at=perfil.criado_em.isoformat(),
            updated_at=perfil.atualizado_em.isoformat(),
            address=EnderecoResponseDTO.from_domain(perfil.endereco),
        )


class PerfilCriadoDTO(BaseModel):
    data: PerfilResponseDTO
