"""Top-level Rollbar API client."""

from __future__ import annotations

import logging

import httpx

from .api import ProjectAccessTokensApi, TeamsApi
from .config import DEFAULT_API_PREFIX, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, TOKEN_HEADER, ClientConfig
from .protocols import RequestExecutor
from .transport import SyncTransport


class RollbarClient:
    """Synchronous Rollbar client exposing one accessor per resource kind.

    The client holds no per-call state, so a single instance can be shared
    between threads.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        api_prefix: str = DEFAULT_API_PREFIX,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        http_client: httpx.Client | None = None,
        request_executor: RequestExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        merged_headers = dict(headers or {})
        if api_key:
            merged_headers[TOKEN_HEADER] = api_key
        self.client_config = ClientConfig(
            base_url=base_url,
            api_prefix=api_prefix,
            timeout_seconds=timeout_seconds,
            headers=merged_headers,
        )
        self._logger = logger or logging.getLogger("rollbar_client")

        self._client = http_client or httpx.Client(
            base_url=self.client_config.base_url,
            timeout=self.client_config.timeout_seconds,
            headers=self.client_config.headers,
        )
        self._transport = SyncTransport(
            self._client,
            self.client_config.api_prefix,
            logger=self._logger.getChild("transport"),
        )
        self._executor = request_executor or self._transport

        self.access_tokens = ProjectAccessTokensApi(self._executor, logger=self._logger.getChild("access_tokens"))
        self.teams = TeamsApi(self._executor, logger=self._logger.getChild("teams"))

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs) -> "RollbarClient":
        return cls(
            base_url=cfg.base_url,
            api_prefix=cfg.api_prefix,
            timeout_seconds=cfg.timeout_seconds,
            headers=cfg.headers,
            **kwargs,
        )

    @classmethod
    def from_env(cls) -> "RollbarClient":
        return cls.from_config(ClientConfig.from_env())

    @classmethod
    def from_profile(cls, profile: str | None = None) -> "RollbarClient":
        return cls.from_config(ClientConfig.from_profile(profile))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RollbarClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
