from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EnderecoResolvido:
    """Resposta da consulta de CEP. erro=True significa CEP inexistente."""
    street: str
    neighborhood: str
    city: str
    state: str
    erro: bool = False


@dataclass(frozen=True)
class NovoEndereco:
    zipcode: str
    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    complement: str | None = None


@dataclass(frozen=True)
class NovoPerfil:
    """Registro persistivel: ja validado e reconciliado, sem confirmacao de email."""
    name: str
    cellphone: str
    email: str
    endereco: NovoEndereco
    cpf: str | None = None
    cnpj: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class Endereco:
    id: str
    perfil_id: str
    zipcode: str
    street: str
    number: str
    complement: str | None
    neighborhood: str
    city: str
    state: str
    criado_em: datetime
    atualizado_em: datetime


@dataclass(frozen=True)
class Perfil:
    """Aggregate Root. Perfil e Endereco sao criados juntos e nunca existem em separado."""
    id: str
    cpf: str | None
    cnpj: str | None
    name: str
    cellphone: str
    phone: str | None
    email: str
    criado_em: datetime
    atualizado_em: datetime
    endereco: Endereco
