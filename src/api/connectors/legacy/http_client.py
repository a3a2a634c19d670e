"""Cliente HTTP do sistema legado.

Round-trip único por envelope: sem retries, sem fila. Timeout configurável
por LEGACY_REQUEST_TIMEOUT_SECONDS. Falha de conexão ou timeout vira
TransportError; respostas 200/404/500 devolvem o corpo XML para o
interpretador decidir o Outcome.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import httpx

from utils.errors import TransportError

logger = logging.getLogger(__name__)

PROCESS_PATH = "/processar"
HEALTH_PATH = "/health"
XML_CONTENT_TYPE = "application/xml"

# Status de proxy/balanceador: legado fora do ar
_UNAVAILABLE_STATUS = frozenset({502, 503, 504})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": XML_CONTENT_TYPE}
    )


class LegacyHttpClient:
    """Implementa LegacyTransportProtocol sobre httpx.

    Args:
        base_url: URL base do legado (ex: http://localhost:3001).
        client: AsyncClient compartilhado, aberto e fechado pelo app.
        config: Timeout e headers.
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient,
        config: HttpClientConfig | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._config = config or HttpClientConfig()
        self._client = client

    async def send_envelope(self, wire_text: str) -> str:
        """Envia envelope XML e devolve o corpo da resposta.

        Raises:
            TransportError: Legado inacessível, timeout ou status de indisponibilidade.
        """
        url = f"{self._base_url}{PROCESS_PATH}"
        started_at = time.perf_counter()
        try:
            response = await self._client.post(
                url,
                content=wire_text.encode("utf-8"),
                headers=self._config.default_headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("legacy_request_timeout", extra={"component": "legacy_http"})
            raise TransportError("legacy_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "legacy_unreachable",
                extra={"component": "legacy_http", "error_type": type(exc).__name__},
            )
            raise TransportError("legacy_unreachable") from exc

        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
        if response.status_code in _UNAVAILABLE_STATUS:
            logger.warning(
                "legacy_unavailable_status",
                extra={"component": "legacy_http", "status_code": response.status_code},
            )
            raise TransportError(f"legacy_status_{response.status_code}")

        logger.info(
            "legacy_response_received",
            extra={
                "component": "legacy_http",
                "status_code": response.status_code,
                "latency_ms": latency_ms,
            },
        )
        return response.text

    async def check_health(self) -> bool:
        """Verifica GET /health do legado (readiness)."""
        url = f"{self._base_url}{HEALTH_PATH}"
        try:
            response = await self._client.get(url, timeout=self._config.timeout_seconds)
        except httpx.HTTPError as exc:
            logger.warning(
                "legacy_health_failed",
                extra={"component": "legacy_http", "error_type": type(exc).__name__},
            )
            return False
        return response.status_code == 200


def create_legacy_http_client(
    base_url: str,
    timeout_seconds: float,
    client: httpx.AsyncClient,
) -> LegacyHttpClient:
    """Factory com config padrão do legado."""
    return LegacyHttpClient(
        base_url=base_url,
        client=client,
        config=HttpClientConfig(timeout_seconds=timeout_seconds),
    )
