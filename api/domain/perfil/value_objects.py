# api/domain/perfil/value_objects.py
#
# Identifier checksum validation for CPF (pessoa fisica) and CNPJ (pessoa
# juridica).
#
# Design decisions:
#   - cpf_valido / cnpj_valido are total: any str is accepted and anything that
#     is not exactly 11/14 ASCII digits returns False. str.isdigit() is not used
#     because it accepts non-ASCII digits such as "²".
#   - CPF and CNPJ wrap already stripped digits and refuse to exist when the
#     checksum fails. The service persists .valor taken from them.
#   - CPF never exposes the full number in repr/str (LGPD).
from __future__ import annotations

import re
from dataclasses import dataclass, field

_SO_DIGITOS = re.compile(r"[0-9]+")

_PESOS_CNPJ_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CNPJ_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def somente_digitos(raw: str) -> str:
    """Remove tudo que nao for digito ASCII."""
    return re.sub(r"[^0-9]", "", raw)


def _digito_cpf(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * (peso_inicial - i) for i, d in enumerate(digitos))
    resto = (soma * 10) % 11
    return 0 if resto == 10 else resto


def _digito_cnpj(digitos: str, pesos: list[int]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _formato_aceito(digitos: object, tamanho: int) -> bool:
    if not isinstance(digitos, str) or len(digitos) != tamanho:
        return False
    if not _SO_DIGITOS.fullmatch(digitos):
        return False
    return len(set(digitos)) > 1


def cpf_valido(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF (11 digitos)."""
    if not _formato_aceito(digitos, 11):
        return False
    d1 = _digito_cpf(digitos[:9], 10)
    d2 = _digito_cpf(digitos[:10], 11)
    return digitos[9:] == f"{d1}{d2}"


def cnpj_valido(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ (14 digitos)."""
    if not _formato_aceito(digitos, 14):
        return False
    d1 = _digito_cnpj(digitos[:12], _PESOS_CNPJ_1)
    d2 = _digito_cnpj(digitos[:12] + str(d1), _PESOS_CNPJ_2)
    return digitos[12:] == f"{d1}{d2}"


@dataclass(frozen=True)
class CPF:
    """CPF ja validado (11 digitos). repr/str mostram so os digitos centrais (LGPD)."""

    valor: str = field(repr=False)

    def __post_init__(self) -> None:
        if not cpf_valido(self.valor):
            raise ValueError("provided CPF is invalid.")

    @property
    def mascarado(self) -> str:
        return f"***.{self.valor[3:6]}.{self.valor[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


@dataclass(frozen=True)
class CNPJ:
    """CNPJ ja validado (14 digitos)."""

    valor: str

    def __post_init__(self) -> None:
        if not cnpj_valido(self.valor):
            raise ValueError("provided CNPJ is invalid.")

    @property
    def formatado(self) -> str:
        d = self.valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __str__(self) -> str:
        return self.formatado
