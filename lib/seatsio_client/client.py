from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Iterable

from .config_types import ClientConfig, Environment
from .errors import AuthError, ConfigurationError, UnsuccessfulResponseError
from .results import ApiResult, decode_body
from .transport import HttpxTransport, Transport

JSON_HEADERS = {"Content-Type": "application/json"}


class SeatsIoClient:
    """Client for the seats.io booking API.

    Every endpoint method sends exactly one request and returns the decoded
    body: parsed JSON, the plain text when the body is not JSON, or "" for an
    empty body. Use get()/post() directly to receive the tagged ApiResult.
    """

    def __init__(
            self,
            secret_key: str | None = None,
            transport: Transport | None = None,
            *,
            staging: bool = False,
            logger=None,
            config: ClientConfig | None = None,
    ):
        cfg = config or ClientConfig()
        if secret_key is not None:
            cfg = replace(cfg, secret_key=secret_key)
        if staging:
            cfg = replace(cfg, environment=Environment.STAGING)
        self._cfg = cfg
        self._transport = transport
        self._default_transport: HttpxTransport | None = None
        self._logger = logger

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def secret_key(self) -> str | None:
        return self._cfg.secret_key

    @secret_key.setter
    def secret_key(self, value: str | None) -> None:
        self._cfg = replace(self._cfg, secret_key=value)

    @property
    def base_url(self) -> str:
        return self._cfg.resolved_base_url()

    @property
    def transport(self) -> Transport:
        if self._transport is not None:
            return self._transport
        if self._default_transport is None:
            self._default_transport = HttpxTransport(self._cfg)
        return self._default_transport

    @transport.setter
    def transport(self, value: Transport | None) -> None:
        self._transport = value

    def close(self) -> None:
        if self._default_transport is not None:
            self._default_transport.close()
            self._default_transport = None

    def __enter__(self) -> SeatsIoClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- API methods ---
    def get_charts(self) -> Any:
        return self.get(f"charts/{self._require_secret_key()}").value

    def get_chart_for_event(self, event_key: str) -> Any:
        return self.get(f"chart/{self._require_secret_key()}/event/{event_key}").value

    def get_chart_details(self, chart_key: str) -> Any:
        # Undocumented endpoint; the chart key alone identifies the chart.
        self._require_secret_key()
        return self.get(f"chart/{chart_key}.json").value

    def create_event(self, chart_key: str, event_key: str) -> Any:
        body = {
            "chartKey": chart_key,
            "eventKey": event_key,
            "secretKey": self._require_secret_key(),
        }
        return self.post("linkChartToEvent", body).value

    def create_user(self) -> Any:
        return self.post("createUser", {"secretKey": self._require_secret_key()}).value

    def book(
            self,
            objects: Iterable[str],
            event_key: str,
            order_key: str | None = None,
            reservation_token: str | None = None,
    ) -> Any:
        body = {
            "objects": list(objects),
            "event": event_key,
            "orderKey": order_key,
            "reservationToken": reservation_token,
            "secretKey": self._require_secret_key(),
        }
        return self.post("book", body).value

    def release(self, objects: Iterable[str], event_key: str, reservation_token: str | None = None) -> Any:
        body = {
            "objects": list(objects),
            "event": event_key,
            "reservationToken": reservation_token,
            "secretKey": self._require_secret_key(),
        }
        return self.post("release", body).value

    def change_status(
            self,
            objects: Iterable[str],
            event_key: str,
            status: str,
            reservation_token: str | None = None,
    ) -> Any:
        body = {
            "objects": list(objects),
            "event": event_key,
            "status": status,
            "reservationToken": reservation_token,
            "secretKey": self._require_secret_key(),
        }
        return self.post("changeStatus", body).value

    def get_order(self, order_key: str, event_key: str) -> Any:
        secret_key = self._require_secret_key()
        return self.get(f"event/{event_key}/orders/{order_key}/{secret_key}").value

    # --- request plumbing ---
    def get(self, path: str) -> ApiResult:
        self._require_secret_key()
        url = self.base_url + path
        response = self.transport.get(url)
        self._debug(f"GET {response.status_code} {url}")
        return self._handle_response("GET", path, response)

    def post(self, path: str, body: dict[str, Any] | None = None) -> ApiResult:
        self._require_secret_key()
        url = self.base_url + path
        payload = json.dumps(body)
        response = self.transport.post(url, JSON_HEADERS, payload)
        self._debug(f"POST {response.status_code} {url} {payload}")
        return self._handle_response("POST", path, response)

    def _handle_response(self, method: str, path: str, response) -> ApiResult:
        status_code = int(response.status_code)
        if not 200 <= status_code < 300:
            msg = f"{method} {self._redact(path)} failed with {status_code}"
            if self._logger:
                self._logger.critical(msg)
            content = response.content or b""
            details = content.decode("utf-8", errors="replace")[:1000] or None
            if status_code in (401, 403):
                raise AuthError(status_code, msg, details)
            raise UnsuccessfulResponseError(status_code, msg, details)

        return decode_body(response.content, self._logger)

    def _require_secret_key(self) -> str:
        secret_key = self._cfg.secret_key
        if not secret_key:
            raise ConfigurationError("You must set a secret key before calling the API.")
        return secret_key

    def _redact(self, text: str) -> str:
        secret_key = self._cfg.secret_key
        return text.replace(secret_key, "***") if secret_key else text

    def _debug(self, msg: str) -> None:
        if self._logger:
            self._logger.debug(msg)
