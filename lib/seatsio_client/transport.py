from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Protocol

import httpx

from .config_types import ClientConfig
from .errors import NetworkError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    status_code: int
    content: bytes = b""

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    def get(self, url: str) -> Response: ...

    def post(self, url: str, headers: Mapping[str, str], body: str) -> Response: ...


class HttpxTransport:
    """Default transport. One httpx.Client per instance."""

    def __init__(self, cfg: ClientConfig, *, client: httpx.Client | None = None):
        self._cfg = cfg
        if cfg.insecure_skip_tls_verify:
            log.warning("TLS certificate verification is disabled for %s", cfg.resolved_base_url())

        self._client = client if client is not None else httpx.Client(
            timeout=cfg.timeout_s,
            headers={"User-Agent": cfg.user_agent},
            verify=not cfg.insecure_skip_tls_verify,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def get(self, url: str) -> Response:
        return self._send("GET", url)

    def post(self, url: str, headers: Mapping[str, str], body: str) -> Response:
        return self._send("POST", url, headers=dict(headers), content=body.encode("utf-8"))

    def _send(self, method: str, url: str, **kwargs) -> Response:
        try:
            r = self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        # httpx undoes Content-Encoding; a gzip body sent without the header stays compressed
        return Response(status_code=r.status_code, content=r.content)
