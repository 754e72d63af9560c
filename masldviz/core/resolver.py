"""
Locate the raw bytes of an artifact.

Uploaded files are consulted first; anything not found there is fetched
from the remote results root. Absence is an ordinary outcome and is never
raised.
"""

from __future__ import annotations

from typing import Optional

from .data_objects import LoadResult, LoadStatus, LocalUploadSource, RemoteSource
from .fetcher import HttpFetcher
from .mixins import LoggingMixin

__all__ = ["ArtifactResolver"]


class ArtifactResolver(LoggingMixin):
    def __init__(self, fetcher: Optional[HttpFetcher] = None, **kwargs):
        super().__init__(**kwargs)
        self.fetcher = fetcher or HttpFetcher()

    def resolve_bytes(
        self,
        logical_path: str,
        *,
        remote: RemoteSource,
        upload: Optional[LocalUploadSource] = None,
    ) -> LoadResult:
        """Return a :class:`LoadResult` carrying the artifact bytes, or NOT_FOUND."""
        if upload:
            uploaded = upload.lookup(logical_path)
            if uploaded is not None:
                try:
                    data = uploaded.read_bytes()
                except OSError as e:
                    self.log(f"Could not read uploaded {uploaded.relative_path}: {e}", level="warning")
                else:
                    return LoadResult(logical_path, LoadStatus.OK, value=data, origin="upload")

        url = remote.url_for(logical_path)
        data = self.fetcher.get(url)
        if data is None:
            return LoadResult.not_found(logical_path)
        return LoadResult(logical_path, LoadStatus.OK, value=data, origin="remote")

    def exists(
        self,
        logical_path: str,
        *,
        remote: RemoteSource,
        upload: Optional[LocalUploadSource] = None,
    ) -> bool:
        """Cheap presence check: upload lookup, then an HTTP HEAD."""
        if upload and upload.lookup(logical_path) is not None:
            return True
        return self.fetcher.head(remote.url_for(logical_path))
