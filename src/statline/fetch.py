"""Sequential download of the first usable document among candidate URLs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import httpx

from statline.config.settings import Settings
from statline.errors import SourceUnavailable
from statline.pdf.layout import extract_text, is_pdf


logger = logging.getLogger(__name__)

Validator = Callable[[bytes], bool]


@dataclass(frozen=True)
class FetchResult:
    url: str
    content: bytes
    attempted: List[str]


def has_min_text(min_length: int) -> Validator:
    """Accept PDFs whose extracted text is at least ``min_length`` characters."""

    def validate(data: bytes) -> bool:
        if not is_pdf(data):
            return False
        return len(extract_text(data).strip()) >= min_length

    return validate


def fetch_first_valid(
    urls: Sequence[str],
    validator: Validator = is_pdf,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> FetchResult:
    """Try ``urls`` in order and return the first body that passes ``validator``.

    Later candidates are never requested once one succeeds. Raises
    ``SourceUnavailable`` with every attempted URL when none do.
    """

    if not urls:
        raise SourceUnavailable([], "no candidate URLs given")
    settings = settings or Settings.from_env()
    owns_client = client is None
    client = client or httpx.Client(
        timeout=settings.fetch_timeout,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )
    attempted: List[str] = []
    reason: Optional[str] = None
    try:
        for url in urls:
            attempted.append(url)
            try:
                response = client.get(url)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                reason = f"{url}: {exc}"
                logger.warning("Fetch failed for %s: %s", url, exc)
                continue
            if not validator(response.content):
                reason = f"{url}: response failed validation"
                logger.warning("Discarding %s: response failed validation", url)
                continue
            logger.info("Using %s after %s attempt(s)", url, len(attempted))
            return FetchResult(url=url, content=response.content, attempted=attempted)
    finally:
        if owns_client:
            client.close()
    raise SourceUnavailable(attempted, reason)
