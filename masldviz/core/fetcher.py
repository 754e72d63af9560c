from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

__all__ = ["HttpFetcher"]


class HttpFetcher:
    """Thin ``requests`` wrapper where every failure means "not there".

    Artifacts are optional, so a non-2xx status or a transport error is
    logged and reported as ``None`` / ``False`` rather than raised.
    """

    def __init__(
        self,
        *,
        timeout_s: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout_s = float(timeout_s)
        self.session = session or requests.Session()

    def get(self, url: str) -> Optional[bytes]:
        try:
            resp = self.session.get(str(url), timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.warning(f"Failed to load {url}: {e}")
            return None
        if resp.status_code // 100 != 2:
            logger.warning(f"Failed to load {url}: HTTP {resp.status_code}")
            return None
        return resp.content

    def head(self, url: str) -> bool:
        try:
            resp = self.session.head(str(url), timeout=self.timeout_s, allow_redirects=True)
        except requests.RequestException as e:
            logger.debug(f"HEAD {url} failed: {e}")
            return False
        return resp.status_code // 100 == 2

    def close(self) -> None:
        self.session.close()
