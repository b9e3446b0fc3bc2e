"""Fetches every page of a paginated GitHub listing."""

import re
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, TypeVar
from urllib.parse import parse_qs, urlsplit

import structlog

from github_release_manager.exceptions import TransportError
from github_release_manager.utils.concurrency import gather_all

logger = structlog.get_logger(__name__)

T = TypeVar("T")

LINK_PATTERN = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="(?P<rel>[^"]+)"')


@dataclass
class ListPage(Generic[T]):
    """One page of a listing and the Link header that came with it."""

    items: list[T] = field(default_factory=list)
    link: str | None = None


def parse_link_header(header: str | None) -> dict[str, str]:
    """Parse an RFC 8288 Link header into a mapping of rel to URL."""
    if not header:
        return {}
    links: dict[str, str] = {}
    for match in LINK_PATTERN.finditer(header):
        for rel in match.group("rel").split():
            links[rel] = match.group("url")
    return links


def last_page_number(header: str | None) -> int | None:
    """Return the page number of the rel="last" link, if there is one."""
    last_url = parse_link_header(header).get("last")
    if last_url is None:
        return None
    pages = parse_qs(urlsplit(last_url).query).get("page")
    if not pages:
        return None
    return int(pages[0])


async def fetch_all_pages(get_page: Callable[[int], Awaitable[ListPage[T]]]) -> list[T]:
    """Fetch all pages and concatenate them in page order.

    Page 1 is fetched first to learn the last page number from its Link header.
    Without one, page 1 is the only page. Otherwise pages 2..last are fetched
    concurrently; the result is still ordered by page index. A failure on any
    page fails the whole fetch.
    """

    async def fetch(page: int) -> ListPage[T]:
        try:
            return await get_page(page)
        except Exception as exc:
            logger.error("Failed to fetch page", page=page, error=str(exc), error_type=type(exc).__name__)
            raise TransportError(page, str(exc)) from exc

    first_page = await fetch(1)
    last_page = last_page_number(first_page.link)
    if last_page is None or last_page <= 1:
        return list(first_page.items)

    logger.debug("Fetching remaining pages concurrently", last_page=last_page)
    remaining_pages: list[ListPage[T]] = await gather_all(*(fetch(page) for page in range(2, last_page + 1)))

    results = list(first_page.items)
    for page in remaining_pages:
        results.extend(page.items)
    return results
