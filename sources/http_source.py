from __future__ import annotations

import logging
from typing import Iterator

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import settings
from m3u.errors import SourceError
from m3u.grammar import iter_lines
from sources.base import LineSource

logger = logging.getLogger(__name__)


def build_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=settings.M3U_HTTP_RETRIES,
        backoff_factor=settings.M3U_HTTP_BACKOFF_FACTOR,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class HttpLineSource(LineSource):
    """Fetches a playlist with a single HTTP GET."""

    def __init__(self, url: str, *, session: requests.Session | None = None) -> None:
        super().__init__(url)
        self._owns_session = session is None
        self._session = session or build_session()
        self._response: requests.Response | None = None
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": settings.M3U_HTTP_USER_AGENT},
                timeout=settings.M3U_HTTP_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            logger.warning(f"[M3U] source={url} kind=http status=error error={exc}")
            self._close_session()
            raise SourceError(url) from exc

        self._response = response
        status = int(response.status_code)
        logger.info(f"[M3U] source={url} kind=http status={status}")
        if status != 200:
            self.close()
            raise SourceError(url)

    def lines(self) -> Iterator[str]:
        if self._response is None:
            raise SourceError(self.identifier)
        try:
            text = self._response.content.decode(settings.M3U_SOURCE_ENCODING)
        except (requests.RequestException, UnicodeDecodeError) as exc:
            logger.warning(f"[M3U] source={self.identifier} kind=http status=read_error error={exc}")
            raise SourceError(self.identifier) from exc
        yield from iter_lines(text)

    def _close_session(self) -> None:
        if self._owns_session:
            self._session.close()

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
            self._response = None
        self._close_session()
        self._owns_session = False
