"""
Per-dashboard session: the active artifact source, its cache and loaders.

One session backs one open dashboard. Changing the source through
:meth:`DashboardSession.set_source` (folder selection, root discovery) or
:meth:`DashboardSession.reset` always empties the cache.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from .caching import ArtifactCache
from .data_objects import LoadResult, LocalUploadSource, RemoteSource, Row, UploadedFile
from .fetcher import HttpFetcher
from .loaders import ArtifactLoader
from .mixins import LoggingMixin
from .resolver import ArtifactResolver
from .settings import ViewerSettings

__all__ = ["DashboardSession", "PROBE_FILE"]

# File whose presence marks a directory as a results root.
PROBE_FILE = "run_config.json"

ArtifactSource = Union[RemoteSource, LocalUploadSource]


class DashboardSession(LoggingMixin):
    def __init__(
        self,
        settings: Optional[ViewerSettings] = None,
        *,
        fetcher: Optional[HttpFetcher] = None,
        fail_fast: bool = False,
    ):
        self.settings = settings or ViewerSettings()
        super().__init__(verbose=self.settings.verbose)
        self.fetcher = fetcher or HttpFetcher(timeout_s=self.settings.request_timeout)
        self.resolver = ArtifactResolver(self.fetcher, verbose=self.settings.verbose)
        self.cache = ArtifactCache()
        self.loader = ArtifactLoader(self, verbose=self.settings.verbose, fail_fast=fail_fast)
        self.remote: RemoteSource = self._default_remote()
        self.upload: Optional[LocalUploadSource] = None
        # Bumped on every source change
        self.generation = 0

    def _default_remote(self) -> RemoteSource:
        return RemoteSource(base=self.settings.default_root, origin=self.settings.origin)

    # ------------------------------------------------------------------
    # Source management
    # ------------------------------------------------------------------

    @property
    def source(self) -> ArtifactSource:
        """The origin artifacts are currently read from."""
        if self.upload:
            return self.upload
        return self.remote

    @property
    def results_path(self) -> str:
        return self.remote.base

    @property
    def has_uploads(self) -> bool:
        return bool(self.upload)

    @property
    def errors(self) -> List[dict]:
        return self.loader.get_errors()

    def set_source(self, source: ArtifactSource) -> None:
        """Switch to *source* and invalidate every cached artifact."""
        if isinstance(source, LocalUploadSource):
            self.upload = source
            self.log(f"Using {len(source)} uploaded files")
        elif isinstance(source, RemoteSource):
            self.remote = source
            self.upload = None
            self.log(f"Using remote results root {source.url_for('')}")
        else:
            raise TypeError(f"Unsupported artifact source: {type(source).__name__}")
        self.cache.clear()
        self.loader.clear_errors()
        self.generation += 1

    def reset(self) -> None:
        """Drop uploads and cached data and go back to the default remote root."""
        self.set_source(self._default_remote())

    def load_uploads(self, files: Iterable[UploadedFile]) -> LocalUploadSource:
        source = LocalUploadSource.from_files(files, base=self.remote.base)
        self.set_source(source)
        return source

    def load_local_dir(self, directory: Union[str, Path]) -> LocalUploadSource:
        """Register every file below *directory* as if the folder had been uploaded.

        Relative paths keep the folder's own name as their first component,
        matching what a browser folder picker reports.
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")
        paths = sorted(p for p in root.rglob("*") if p.is_file())
        files = [
            UploadedFile(relative_path=f"{root.name}/{p.relative_to(root).as_posix()}", local_path=str(p))
            for p in self.log_progress(paths, desc="Indexing files", total=len(paths))
        ]
        return self.load_uploads(files)

    def discover_root(self, candidates: Optional[Sequence[str]] = None) -> Optional[RemoteSource]:
        """Probe candidate results roots in order; activate the first that serves the probe file.

        Returns the activated source, or None when no candidate answered. In
        that case the current source is left untouched.
        """
        candidates = list(candidates) if candidates is not None else list(self.settings.candidate_roots)
        for base in candidates:
            candidate = RemoteSource(base=base, origin=self.remote.origin)
            if self.fetcher.get(candidate.url_for(PROBE_FILE)) is not None:
                self.set_source(candidate)
                self.log(f"Found results root: {base}/")
                return candidate
            self.log(f"No {PROBE_FILE} under {base}/", level="debug")
        self.log(f"Results folder not found; tried {', '.join(candidates)}", level="warning")
        return None

    # ------------------------------------------------------------------
    # Artifact access
    # ------------------------------------------------------------------

    def url_for(self, logical_path: str) -> str:
        return self.remote.url_for(logical_path)

    def resolve_bytes(self, logical_path: str) -> LoadResult:
        return self.resolver.resolve_bytes(logical_path, remote=self.remote, upload=self.upload)

    def exists(self, logical_path: str) -> bool:
        return self.resolver.exists(logical_path, remote=self.remote, upload=self.upload)

    def load_table(self, logical_path: str) -> Optional[List[Row]]:
        return self.loader.load_table(logical_path)

    def load_json(self, logical_path: str) -> Any:
        return self.loader.load_json(logical_path)

    def close(self) -> None:
        self.fetcher.close()
