# api/infrastructure/viacep_client.py
#
# IO-only: resolve a CEP against ViaCEP (GET {base}/{cep}/json/).
#
# Design decisions:
#   - Exactly one GET per call. No retries and no cache; callers that want
#     either wrap the client.
#   - Every failure mode (timeout, connection error, non-2xx, body that is not
#     a JSON object, "erro" flag) becomes AddressLookupError so the service
#     never sees httpx internals.
#   - ViaCEP reports an unknown CEP with HTTP 200 and {"erro": true}; the v2
#     API sends the flag as the string "true". Both are accepted.
#   - An httpx.Client may be injected (tests use httpx.MockTransport). When
#     none is given a short-lived client is opened per call.
from __future__ import annotations

import logging
from typing import Any

import httpx

from api.domain.perfil.entities import EnderecoResolvido
from api.domain.perfil.errors import AddressLookupError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://viacep.com.br/ws"
DEFAULT_TIMEOUT = 9.0


class _CepNaoEncontrado(Exception):
    pass


def _flag_erro(payload: dict[str, Any]) -> bool:
    erro = payload.get("erro")
    return erro is True or (isinstance(erro, str) and erro.lower() == "true")


def _texto(payload: dict[str, Any], chave: str) -> str:
    valor = payload.get(chave)
    return str(valor).strip() if valor is not None else ""


class ViaCepClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def resolver(self, cep: str) -> EnderecoResolvido:
        """Consulta o CEP e devolve logradouro, bairro, cidade e UF.

        Raises:
            AddressLookupError: servico inacessivel, timeout, resposta invalida
                ou CEP inexistente.
        """
        url = f"{self._base_url}/{cep}/json/"
        try:
            payload = self._get_json(url)
            if _flag_erro(payload):
                raise _CepNaoEncontrado("zipCode not found in ViaCEP database")
        except (httpx.HTTPError, ValueError, _CepNaoEncontrado) as err:
            logger.warning("consulta ViaCEP falhou para cep=%s: %s", cep, err)
            raise AddressLookupError(
                f"error fetching address from ViaCEP: {str(err) or type(err).__name__}"
            ) from err

        return EnderecoResolvido(
            street=_texto(payload, "logradouro"),
            neighborhood=_texto(payload, "bairro"),
            city=_texto(payload, "localidade"),
            state=_texto(payload, "uf"),
        )

    def _get_json(self, url: str) -> dict[str, Any]:
        if self._client is not None:
            response = self._client.get(url, timeout=self._timeout)
        else:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                response = client.get(url)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("unexpected ViaCEP response body")
        return payload
