from pathlib import Path
from typing import Dict, Optional

import httpx
from loguru import logger

from hockey_pool.config.settings import settings
from hockey_pool.scrapers.base_client import BaseClient, ScraperError


class RosterSourceError(Exception):
    """Raised when a roster CSV cannot be read."""

    pass


class RosterSource(BaseClient):
    """Reads roster CSV text from a local file, a URL, or the roster repository.

    ``location`` is tried as a local path first, then as an http(s) URL, and
    otherwise as a path inside the configured GitHub repository.
    """

    source_name = "roster source"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        raw_base_url: Optional[str] = None,
        token: Optional[str] = None,
    ):
        super().__init__(client)
        self.raw_base_url = (raw_base_url or settings.github_raw_base_url).rstrip("/")
        self.token = token if token is not None else settings.github_token

    def resolve_url(self, location: str) -> str:
        if location.startswith(("http://", "https://")):
            return location
        return f"{self.raw_base_url}/{location.lstrip('/')}"

    async def read(self, location: str) -> str:
        """Returns the roster text at ``location``.

        Raises:
            RosterSourceError: if the file or URL cannot be read.
        """
        path = Path(location)
        if path.is_file():
            logger.info(f"Reading roster from local file: {path}")
            try:
                return path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise RosterSourceError(f"Could not read roster file {path}: {e}") from e

        url = self.resolve_url(location)
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.info(f"Fetching roster from: {url}")
        try:
            response = await self._make_request("GET", url, headers=headers)
        except (ScraperError, httpx.RequestError) as e:
            raise RosterSourceError(f"Could not fetch roster from {url}: {e}") from e

        logger.info(f"Downloaded {len(response.content)} bytes")
        return response.text
