"""
Handles the retrieval of template files over HTTP.
"""

import asyncio
import logging

import aiohttp

from citrusrules import __version__
from citrusrules.exceptions import FetchError
from citrusrules.models.config import FetchConfig
from citrusrules.utils.path import template_filename

log = logging.getLogger(__name__)


def build_session(config: FetchConfig) -> aiohttp.ClientSession:
    """
    Creates the aiohttp ClientSession used for a fetch session.

    Must be called from within a running event loop. The total timeout bounds
    every single request.
    """
    connector = aiohttp.TCPConnector(
        limit=config.max_workers,
        ttl_dns_cache=600,
        enable_cleanup_closed=True,
    )
    timeout = aiohttp.ClientTimeout(total=config.timeout_seconds, sock_connect=15)
    return aiohttp.ClientSession(
        connector=connector,
        timeout=timeout,
        headers={"User-Agent": f"citrusrules/{__version__}"},
    )


class TemplateFetcher:
    """Downloads single template files from the remote template source."""

    def __init__(self, session: aiohttp.ClientSession, base_url: str):
        self.session = session
        self.base_url = base_url.rstrip("/")

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{template_filename(name)}"

    async def fetch(self, name: str) -> bytes:
        """
        Fetches the raw content of one template.

        Exactly one GET is issued; there is no retry.

        Raises:
            FetchError: On a non-2xx response, a network error or a timeout.
        """
        url = self.url_for(name)
        log.debug(f"GET {url}")
        try:
            async with self.session.get(url) as response:
                response.raise_for_status()
                content = await response.read()
        except aiohttp.ClientResponseError as e:
            raise FetchError(name, f"HTTP {e.status}: {e.message}") from e
        except asyncio.TimeoutError as e:
            raise FetchError(name, "request timed out") from e
        except aiohttp.ClientError as e:
            raise FetchError(name, str(e) or type(e).__name__) from e

        log.debug(f"Fetched {len(content)} bytes from {url}")
        return content
