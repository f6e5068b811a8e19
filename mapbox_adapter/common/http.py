"""HTTP transport with retries and timeouts."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

from mapbox_adapter.common.constants import USER_AGENT
from mapbox_adapter.common.errors import TransportError
from mapbox_adapter.common.models import RawResponse

# 401 and 429 are classified by the caller and must never be retried here.
RETRYABLE_STATUS_CODES = {408, 500, 502, 503, 504}


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 10.0
    read: float = 30.0


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    multiplier: float = 0.5
    max_wait: float = 8.0


class RetryableHttpError(TransportError):
    def __init__(self, message: str, response: RawResponse | None = None) -> None:
        super().__init__(message)
        self.response = response


class HttpClient:
    def __init__(
        self,
        *,
        timeout: TimeoutConfig | None = None,
        retry: RetryConfig | None = None,
    ) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.retry = retry or RetryConfig()
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": USER_AGENT, "Accept": "application/json"}

    def _get(self, url: str) -> RawResponse:
        try:
            response = self.session.request(
                method="GET",
                url=url,
                headers=self._headers(),
                timeout=(self.timeout.connect, self.timeout.read),
            )
        except requests.RequestException as exc:
            raise RetryableHttpError(f"Request failed: {exc.__class__.__name__}") from exc

        raw = RawResponse(status_code=response.status_code, body=response.text)
        if raw.status_code in RETRYABLE_STATUS_CODES:
            raise RetryableHttpError(f"Retryable HTTP status: {raw.status_code}", response=raw)
        return raw

    def get(self, url: str) -> RawResponse:
        """GET ``url`` and return its status and body.

        Retryable statuses that persist past the last attempt are returned as
        a normal response; connection-level failures raise ``TransportError``.
        """

        @retry(
            stop=stop_after_attempt(self.retry.max_attempts),
            wait=wait_exponential_jitter(
                initial=self.retry.multiplier,
                max=self.retry.max_wait,
                jitter=self.retry.multiplier,
            ),
            retry=retry_if_exception_type(RetryableHttpError),
            reraise=True,
        )
        def _wrapped() -> RawResponse:
            return self._get(url)

        try:
            return _wrapped()
        except RetryableHttpError as exc:
            if exc.response is not None:
                return exc.response
            raise TransportError(str(exc)) from exc
