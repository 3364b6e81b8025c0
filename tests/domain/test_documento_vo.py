import dataclasses

import pytest

from api.domain.perfil.value_objects import CNPJ, CPF, cnpj_valido, cpf_valido, somente_digitos

CPFS_VALIDOS = ["52998224725", "11144477735", "39053344705"]
CNPJS_VALIDOS = ["11222333000181", "33000167000101"]


@pytest.mark.parametrize("cpf", CPFS_VALIDOS)
def test_cpf_valido_aceita_cpfs_reais(cpf: str) -> None:
    assert cpf_valido(cpf)


@pytest.mark.parametrize("cnpj", CNPJS_VALIDOS)
def test_cnpj_valido_aceita_cnpjs_reais(cnpj: str) -> None:
    assert cnpj_valido(cnpj)


@pytest.mark.parametrize("raw", ["", "123", "529982247251", "5299822472", "abcdefghijk", "529.982.247-25"])
def test_cpf_valido_rejeita_formato_errado(raw: str) -> None:
    assert not cpf_valido(raw)


@pytest.mark.parametrize("raw", ["", "123", "112223330001811", "11.222.333/0001-81", "1122233300018a"])
def test_cnpj_valido_rejeita_formato_errado(raw: str) -> None:
    assert not cnpj_valido(raw)


def test_digitos_nao_ascii_nao_passam() -> None:
    """str.isdigit aceita '²'; a validacao nao pode aceitar."""
    assert not cpf_valido("5299822472²")


@pytest.mark.parametrize("d", "0123456789")
def test_todos_digitos_iguais_invalidos(d: str) -> None:
    assert not cpf_valido(d * 11)
    assert not cnpj_valido(d * 14)


def test_funcoes_sao_totais_para_nao_str() -> None:
    assert not cpf_valido(None)  # type: ignore[arg-type]
    assert not cnpj_valido(12345678901234)  # type: ignore[arg-type]


@pytest.mark.parametrize("valido", CPFS_VALIDOS)
def test_cpf_qualquer_digito_alterado_invalida(valido: str) -> None:
    """O checksum detecta qualquer erro de transcricao em um unico digito."""
    for pos in range(11):
        for novo in "0123456789":
            if novo == valido[pos]:
                continue
            mutado = valido[:pos] + novo + valido[pos + 1:]
            assert not cpf_valido(mutado), mutado


@pytest.mark.parametrize("valido", CNPJS_VALIDOS)
def test_cnpj_qualquer_digito_alterado_invalida(valido: str) -> None:
    for pos in range(14):
        for novo in "0123456789":
            if novo == valido[pos]:
                continue
            mutado = valido[:pos] + novo + valido[pos + 1:]
            assert not cnpj_valido(mutado), mutado


def test_somente_digitos_remove_mascara() -> None:
    assert somente_digitos("529.982.247-25") == "52998224725"
    assert somente_digitos("(11) 99999-9999") == "11999999999"


def test_cpf_vo_guarda_digitos() -> None:
    assert CPF("52998224725").valor == "52998224725"


@pytest.mark.parametrize("raw", ["52998224700", "529.982.247-25", "11111111111"])
def test_cpf_vo_rejeita_invalido(raw: str) -> None:
    with pytest.raises(ValueError, match="provided CPF is invalid."):
        CPF(raw)


def test_cpf_vo_nunca_mostra_completo() -> None:
    cpf = CPF("52998224725")
    assert "52998224725" not in repr(cpf)
    assert "52998224725" not in str(cpf)
    assert cpf.mascarado == "***.982.247-**"


def test_cnpj_vo_formatado() -> None:
    assert str(CNPJ("11222333000181")) == "11.222.333/0001-81"


def test_cnpj_vo_rejeita_invalido() -> None:
    with pytest.raises(ValueError, match="provided CNPJ is invalid."):
        CNPJ("11111111111111")


def test_cnpj_vo_imutavel() -> None:
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj.valor = "33000167000101"  # type: ignore[misc]
