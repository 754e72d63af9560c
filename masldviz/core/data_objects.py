"""
Core data objects for the results viewer.

These objects define the contract between the resolver, the loaders and the
page views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urljoin

from .paths import basename, normalize_path_variants, upload_keys

Row = Dict[str, str]


class ArtifactKind(str, Enum):
    TABLE = "table"
    JSON = "json"
    IMAGE = "image"


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


@dataclass
class LoadResult:
    """Outcome of resolving or loading one artifact.

    ``value`` holds raw bytes for resolver results and the parsed value for
    loader results.
    """
    path: str
    status: LoadStatus
    value: Any = None
    error: Optional[Exception] = None
    origin: Optional[str] = None  # "upload", "remote" or "cache"

    @property
    def found(self) -> bool:
        return self.status == LoadStatus.OK

    @classmethod
    def not_found(cls, path: str) -> "LoadResult":
        return cls(path=path, status=LoadStatus.NOT_FOUND)


@dataclass
class UploadedFile:
    """A file picked from local disk.

    Exactly one of ``data`` (in-memory bytes) or ``local_path`` (a file on
    disk, e.g. a Gradio upload temp file) is expected to be set.
    """
    relative_path: str
    data: Optional[bytes] = None
    local_path: Optional[str] = None

    @property
    def name(self) -> str:
        return basename(self.relative_path)

    def read_bytes(self) -> bytes:
        if self.data is not None:
            return self.data
        if self.local_path is None:
            raise OSError(f"No content available for {self.relative_path}")
        return Path(self.local_path).read_bytes()


@dataclass(frozen=True)
class RemoteSource:
    """Results served over HTTP below ``origin``."""
    base: str = "results"
    origin: str = "http://127.0.0.1:8000/"

    kind = "remote"

    def url_for(self, logical_path: str) -> str:
        # urljoin resolves "../results" the way a browser resolves a relative URL
        origin = self.origin if self.origin.endswith("/") else self.origin + "/"
        return urljoin(origin, f"{self.base}/{logical_path}")


@dataclass
class LocalUploadSource:
    """A set of files picked from local disk, indexed under several spellings."""
    files: List[UploadedFile] = field(default_factory=list)
    base: Optional[str] = None
    _by_path: Dict[str, UploadedFile] = field(default_factory=dict, init=False, repr=False)
    _by_name: Dict[str, UploadedFile] = field(default_factory=dict, init=False, repr=False)

    kind = "upload"

    def __post_init__(self) -> None:
        for uploaded in self.files:
            for key in upload_keys(uploaded.relative_path):
                self._by_path[key] = uploaded
            self._by_name.setdefault(uploaded.name, uploaded)

    @classmethod
    def from_files(cls, files: Iterable[UploadedFile], base: Optional[str] = None) -> "LocalUploadSource":
        return cls(files=list(files), base=base)

    def __len__(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return bool(self.files)

    def keys(self) -> List[str]:
        return list(self._by_path.keys())

    def lookup(self, logical_path: str) -> Optional[UploadedFile]:
        """Return the uploaded file matching any spelling of *logical_path*."""
        variants = normalize_path_variants(logical_path, self.base)
        for variant in variants:
            if variant in self._by_path:
                return self._by_path[variant]
        for variant in variants:
            if variant in self._by_name:
                return self._by_name[variant]
        return None
