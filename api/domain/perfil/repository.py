from __future__ import annotations

from typing import Protocol

from .entities import EnderecoResolvido, NovoPerfil, Perfil


class PerfilRepository(Protocol):
    def criar_perfil(self, novo: NovoPerfil) -> Perfil: ...


class ResolvedorEndereco(Protocol):
    def resolver(self, cep: str) -> EnderecoResolvido: ...
