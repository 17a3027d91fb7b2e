"""HTTP retrieval of the Roomzilla timeline page."""

from __future__ import annotations

from typing import Optional

import httpx
import structlog

from .config import Settings
from .errors import FetchError

LOGGER = structlog.get_logger(__name__)


def fetch_timeline(settings: Settings, client: Optional[httpx.Client] = None) -> str:
    """Download the timeline page and return its HTML."""
    url = str(settings.timeline_url)
    LOGGER.info("timeline.fetch.start", url=url)

    try:
        if client is None:
            with _build_client(settings) as owned_client:
                response = owned_client.get(url)
        else:
            response = client.get(url)
    except httpx.HTTPError as exc:
        LOGGER.error("timeline.fetch.failed", url=url, error=str(exc))
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    if response.is_success:
        LOGGER.info("timeline.fetch.success", url=url, bytes=len(response.content))
        return response.text
    LOGGER.error("timeline.fetch.failed", url=url, status_code=response.status_code)
    raise FetchError(f"Fetching {url} failed with HTTP {response.status_code}")


def _build_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        timeout=settings.timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )
