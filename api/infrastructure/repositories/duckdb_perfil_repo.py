from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone

import duckdb

from api.domain.perfil.entities import Endereco, NovoPerfil, Perfil
from api.domain.perfil.errors import ConflictError, StoreError

logger = logging.getLogger(__name__)

_CHAVE_DUPLICADA = re.compile(r'Duplicate key "(?P<chave>.*?)" violates', re.DOTALL)
_CAMPO = re.compile(r"^\s*(?P<campo>[A-Za-z_][A-Za-z0-9_]*)\s*:")
_MARCAS_UNICIDADE = ("duplicate key", "unique constraint", "primary key constraint")

_INSERT_PERFIL = """
    INSERT INTO perfil
        (id, cpf, cnpj, name, cellphone, phone, email, criado_em, atualizado_em)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

_INSERT_ENDERECO = """
    INSERT INTO endereco
        (id, perfil_id, zipcode, street, number, complement,
         neighborhood, city, state, criado_em, atualizado_em)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


def eh_violacao_unicidade(err: Exception) -> bool:
    if not isinstance(err, (duckdb.ConstraintException, duckdb.TransactionException)):
        return False
    mensagem = str(err).lower()
    return any(marca in mensagem for marca in _MARCAS_UNICIDADE)


def campos_duplicados(mensagem: str) -> list[str]:
    """Extrai os nomes de coluna de 'Duplicate key "email: x, cpf: y" violates ...'."""
    match = _CHAVE_DUPLICADA.search(mensagem)
    if match is None:
        return []
    campos: list[str] = []
    for parte in match.group("chave").split(", "):
        campo = _CAMPO.match(parte)
        if campo and campo.group("campo") not in campos:
            campos.append(campo.group("campo"))
    return campos


def mensagem_conflito(campos: list[str]) -> str:
    if not campos:
        return "field already taken"
    return f"{', '.join(campos)} already taken"


class DuckDBPerfilRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def criar_perfil(self, novo: NovoPerfil) -> Perfil:
        """Insere perfil + endereco numa unica transacao.

        Raises:
            ConflictError: email, cpf, cnpj ou cellphone ja cadastrados.
            StoreError:    qualquer outra falha; nada fica gravado.
        """
        agora = datetime.now(timezone.utc)
        gravado_em = agora.replace(tzinfo=None)  # coluna TIMESTAMP, sempre UTC
        perfil_id = str(uuid.uuid4())
        endereco_id = str(uuid.uuid4())
        end = novo.endereco

        cursor = self._conn.cursor()
        try:
            cursor.begin()
            try:
                cursor.execute(
                    _INSERT_PERFIL,
                    [perfil_id, novo.cpf, novo.cnpj, novo.name, novo.cellphone,
                     novo.phone, novo.email, gravado_em, gravado_em],
                )
                cursor.execute(
                    _INSERT_ENDERECO,
                    [endereco_id, perfil_id, end.zipcode, end.street, end.number,
                     end.complement, end.neighborhood, end.city, end.state,
                     gravado_em, gravado_em],
                )
                cursor.commit()
            except Exception as err:
                _rollback(cursor)
                raise _traduzir_erro(err) from err
        finally:
            cursor.close()

        logger.info("perfil criado id=%s", perfil_id)
        return Perfil(
            id=perfil_id,
            cpf=novo.cpf,
            cnpj=novo.cnpj,
            name=novo.name,
            cellphone=novo.cellphone,
            phone=novo.phone,
            email=novo.email,
            criado_em=agora,
            atualizado_em=agora,
            endereco=Endereco(
                id=endereco_id,
                perfil_id=perfil_id,
                zipcode=end.zipcode,
                street=end.street,
                number=end.number,
                complement=end.complement,
                neighborhood=end.neighborhood,
                city=end.city,
                state=end.state,
                criado_em=agora,
                atualizado_em=agora,
            ),
        )


def _rollback(cursor: duckdb.DuckDBPyConnection) -> None:
    # Apos commit com falha o DuckDB ja desfez a transacao e rollback() levanta.
    try:
        cursor.rollback()
    except duckdb.TransactionException:
        logger.debug("rollback ignorado: nenhuma transacao ativa")


def _traduzir_erro(err: Exception) -> ConflictError | StoreError:
    if eh_violacao_unicidade(err):
        mensagem = mensagem_conflito(campos_duplicados(str(err)))
        logger.info("conflito de unicidade: %s", mensagem)
        return ConflictError(mensagem)
    logger.error("falha ao gravar perfil: %s", err)
    return StoreError(f"profile not created: {str(err) or 'String error'}")
