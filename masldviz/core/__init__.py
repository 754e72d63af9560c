"""Artifact resolution, parsing and caching for the MASLD results viewer."""

from .caching import ArtifactCache
from .data_objects import (
    ArtifactKind,
    LoadResult,
    LoadStatus,
    LocalUploadSource,
    RemoteSource,
    UploadedFile,
)
from .loaders import ArtifactLoader, ArtifactParseError
from .paths import normalize_path_variants
from .resolver import ArtifactResolver
from .session import DashboardSession
from .settings import ViewerSettings

__all__ = [
    "ArtifactCache",
    "ArtifactKind",
    "ArtifactLoader",
    "ArtifactParseError",
    "ArtifactResolver",
    "DashboardSession",
    "LoadResult",
    "LoadStatus",
    "LocalUploadSource",
    "RemoteSource",
    "UploadedFile",
    "ViewerSettings",
    "normalize_path_variants",
]
