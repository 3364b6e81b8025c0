from __future__ import annotations

from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import duckdb
import pytest
from fastapi.testclient import TestClient

from api.domain.perfil.entities import Endereco, EnderecoResolvido, NovoPerfil, Perfil
from api.infrastructure.duckdb_connection import aplicar_schema

CPF_VALIDO = "52998224725"
CNPJ_VALIDO = "11222333000181"


class ResolvedorFake:
    """Substitui o ViaCepClient: devolve um endereco fixo ou levanta o erro configurado."""

    def __init__(
        self,
        resolvido: EnderecoResolvido | None = None,
        erro: Exception | None = None,
    ) -> None:
        self.resolvido = resolvido or EnderecoResolvido(
            street="Praça da Sé",
            neighborhood="Sé",
            city="São Paulo",
            state="SP",
        )
        self.erro = erro
        self.chamadas: list[str] = []

    def resolver(self, cep: str) -> EnderecoResolvido:
        self.chamadas.append(cep)
        if self.erro is not None:
            raise self.erro
        return self.resolvido


class PerfilRepoFake:
    """Guarda o NovoPerfil recebido e devolve um Perfil com ids/timestamps fixos."""

    def __init__(self, erro: Exception | None = None) -> None:
        self.erro = erro
        self.gravados: list[NovoPerfil] = []

    def criar_perfil(self, novo: NovoPerfil) -> Perfil:
        if self.erro is not None:
            raise self.erro
        self.gravados.append(novo)
        momento = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
        end = novo.endereco
        return Perfil(
            id="perfil-1",
            cpf=novo.cpf,
            cnpj=novo.cnpj,
            name=novo.name,
            cellphone=novo.cellphone,
            phone=novo.phone,
            email=novo.email,
            criado_em=momento,
            atualizado_em=momento,
            endereco=Endereco(
                id="endereco-1",
                perfil_id="perfil-1",
                zipcode=end.zipcode,
                street=end.street,
                number=end.number,
                complement=end.complement,
                neighborhood=end.neighborhood,
                city=end.city,
                state=end.state,
                criado_em=momento,
                atualizado_em=momento,
            ),
        )


@pytest.fixture
def payload() -> dict[str, Any]:
    """Corpo JSON valido, com mascaras que a validacao deve remover."""
    return {
        "cpf": "529.982.247-25",
        "name": "Maria da Silva",
        "cellphone": "(11) 99999-9999",
        "email": " Maria.Silva@Example.com ",
        "emailConfirmation": "maria.silva@example.com",
        "zipCode": "01001-000",
        "street": "Praca da Se",
        "number": "100",
        "neighborhood": "Se",
        "city": "São Paulo",
        "state": "SP",
    }


@pytest.fixture
def resolvedor() -> ResolvedorFake:
    return ResolvedorFake()


@pytest.fixture
def db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema de perfil/endereco."""
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def client(
    db: duckdb.DuckDBPyConnection,
    resolvedor: ResolvedorFake,
) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory e ViaCEP substituido."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(db)

    from api.interfaces.api.dependencies import get_resolvedor
    from api.interfaces.api.main import app

    app.dependency_overrides[get_resolvedor] = lambda: resolvedor
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def perfil_repo() -> PerfilRepoFake:
    return PerfilRepoFake()
