# api/domain/perfil/services.py
#
# Pure address reconciliation between caller input and the CEP lookup.
#
# Design decisions:
#   - No IO. The shell (ViaCepClient) fetches EnderecoResolvido; these
#     functions only compare and merge strings.
#   - City comparison is accent- and case-insensitive: "Sao Paulo" matches
#     "São Paulo". Normalisation is NFD + removal of combining marks, then
#     strip and casefold.
#   - State comparison is upper-trimmed equality. UFs carry no diacritics.
#   - A blank provided city/state is treated as absent and always matches.
#
# Invariants:
#   - reconciliar_endereco either returns None or raises AddressMismatchError.
#   - campo_com_fallback never returns None.
from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from .entities import EnderecoResolvido
from .errors import AddressMismatchError


@dataclass(frozen=True)
class EnderecoFornecido:
    city: str | None = None
    state: str | None = None


def normalizar_cidade(valor: str) -> str:
    decomposto = unicodedata.normalize("NFD", valor)
    sem_acento = "".join(c for c in decomposto if not unicodedata.combining(c))
    return sem_acento.strip().casefold()


def _ausente(valor: str | None) -> bool:
    return valor is None or not valor.strip()


def cidade_confere(fornecida: str | None, resolvida: str) -> bool:
    if _ausente(fornecida):
        return True
    return normalizar_cidade(fornecida) == normalizar_cidade(resolvida or "")  # type: ignore[arg-type]


def uf_confere(fornecida: str | None, resolvida: str) -> bool:
    if _ausente(fornecida):
        return True
    return fornecida.strip().upper() == (resolvida or "").strip().upper()  # type: ignore[union-attr]


def reconciliar_endereco(fornecido: EnderecoFornecido, resolvido: EnderecoResolvido) -> None:
    """Confere cidade e UF informadas contra o endereco resolvido pelo CEP.

    Raises:
        AddressMismatchError: cidade ou UF divergem do CEP.
    """
    if not cidade_confere(fornecido.city, resolvido.city):
        raise AddressMismatchError(
            f"provided city '{fornecido.city}' does not match zipCode city '{resolvido.city}'"
        )
    if not uf_confere(fornecido.state, resolvido.state):
        raise AddressMismatchError(
            f"provided state '{fornecido.state}' does not match zipCode state '{resolvido.state}'"
        )


def campo_com_fallback(resolvido: str | None, fornecido: str | None) -> str:
    """Valor do CEP se nao-vazio; senao o valor informado trimado; senao ""."""
    if resolvido and resolvido.strip():
        return resolvido.strip()
    if fornecido and fornecido.strip():
        return fornecido.strip()
    return ""
