from __future__ import annotations

import enum
from dataclasses import dataclass

BASE_URL = "https://app.seats.io/api/"
BASE_URL_STAGING = "https://app-staging.seats.io/api/"


class Environment(enum.Enum):
    PRODUCTION = "production"
    STAGING = "staging"

    @property
    def base_url(self) -> str:
        if self is Environment.STAGING:
            return BASE_URL_STAGING
        return BASE_URL


@dataclass(frozen=True)
class ClientConfig:
    secret_key: str | None = None
    environment: Environment = Environment.PRODUCTION
    base_url: str | None = None
    timeout_s: float = 15.0
    # Opt-in only. Never implied by the staging environment.
    insecure_skip_tls_verify: bool = False
    user_agent: str = "seatsio-client/0.1.0"

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/") + "/"
        return self.environment.base_url
