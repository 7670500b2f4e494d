from typing import Any, Dict, Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from hockey_pool.config.settings import settings

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class ScraperError(Exception):
    """Custom exception for data source errors."""

    pass


class AuthenticationError(ScraperError):
    """Exception raised for authentication failures (401, 403)."""

    pass


class RateLimitError(ScraperError):
    """Exception raised for rate limit errors (429)."""

    pass


class RetryableStatusError(ScraperError):
    """Exception raised for transient server-side statuses (408, 5xx)."""

    pass


class BaseClient:
    """Async HTTP client with retry logic shared by every data source."""

    source_name: str = "unknown"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={"User-Agent": "hockey-pool/0.1 (+standings)"},
        )

    @retry(
        stop=stop_after_attempt(4),  # 3 retries after the first attempt
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(
            (httpx.RequestError, RateLimitError, RetryableStatusError)
        ),
        reraise=True,  # Reraise the last exception after max attempts
    )
    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes an asynchronous HTTP request with retry logic."""
        logger.debug(f"Making request: {method} {url} params={params}")
        try:
            response = await self.client.request(
                method, url, headers=headers, params=params, **kwargs
            )
        except httpx.RequestError as e:
            # Network errors, timeouts etc. - retried by tenacity
            logger.warning(f"Request error for {self.source_name}, retrying: {e}")
            raise

        if response.status_code in {401, 403}:
            logger.warning(
                f"Authentication error ({response.status_code}) for {self.source_name} at {url}."
            )
            raise AuthenticationError(
                f"Authentication failed ({response.status_code}) for {self.source_name}"
            )

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(
                f"Rate limit hit (429) for {self.source_name} at {url}. Retry-After: {retry_after}"
            )
            raise RateLimitError(f"Rate limited by {self.source_name}")

        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Retrying request for {self.source_name} due to status {response.status_code}"
            )
            raise RetryableStatusError(f"HTTP error: {response.status_code}")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during request for {self.source_name}: {e.response.status_code} - {e}"
            )
            raise ScraperError(f"HTTP error: {e.response.status_code}") from e

        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    async def _get_json(self, url: str, **kwargs) -> Any:
        response = await self._make_request("GET", url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Raw response content: {response.text[:500]}")
            raise ScraperError(f"Invalid JSON from {self.source_name} at {url}") from e

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed HTTP client for {self.source_name}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
