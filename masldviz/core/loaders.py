"""
Typed loaders for tabular (CSV) and structured (JSON) artifacts.

Both loaders share the same flow: cache check, resolve bytes, parse, cache.
A missing artifact is ``None``. A malformed CSV raises
:class:`ArtifactParseError`; a malformed JSON file is treated as missing so
that a broken config never takes the page down with it.
"""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import pandas as pd

from .data_objects import ArtifactKind, LoadResult, LoadStatus, Row
from .mixins import ErrorHandlingMixin, LoggingMixin

if TYPE_CHECKING:
    from .session import DashboardSession

__all__ = ["ArtifactParseError", "ArtifactLoader", "parse_table", "parse_json"]


class ArtifactParseError(ValueError):
    """Raised when an artifact's bytes were found but could not be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason


def _decode(data: bytes, path: str) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ArtifactParseError(path, f"not valid UTF-8 ({e})") from e


def parse_table(data: bytes, path: str = "<table>") -> List[Row]:
    """Parse delimited text with a header row into an ordered list of rows.

    Every cell is kept as a string; empty cells are ``""`` and blank lines
    are skipped. Header cells are used exactly as written, empty ones
    included; when a name repeats, the rightmost column's value wins.
    """
    text = _decode(data, path)
    if not text.strip():
        return []
    try:
        # header=None so pandas does not rename blank or repeated header cells
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ArtifactParseError(path, str(e)) from e
    df = df.fillna("")
    columns = list(df.iloc[0])
    return [dict(zip(columns, values)) for values in df.iloc[1:].itertuples(index=False, name=None)]


def parse_json(data: bytes, path: str = "<json>") -> Any:
    text = _decode(data, path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(path, str(e)) from e


_PARSERS: Dict[ArtifactKind, Callable[[bytes, str], Any]] = {
    ArtifactKind.TABLE: parse_table,
    ArtifactKind.JSON: parse_json,
}


class ArtifactLoader(LoggingMixin, ErrorHandlingMixin):
    """Cache-backed loaders bound to one :class:`DashboardSession`."""

    def __init__(self, session: "DashboardSession", **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def load(self, logical_path: str, kind: ArtifactKind) -> LoadResult:
        """Load and parse *logical_path*, returning an explicit status.

        Cache hits never touch the resolver. Only successful parses are
        cached, and only if the session's source did not change while the
        bytes were being resolved.
        """
        if kind not in _PARSERS:
            raise ValueError(f"No parser for artifact kind {kind!r}")

        cache = self.session.cache
        if logical_path in cache:
            self.logger.debug(f"Cache hit for {logical_path}")
            return LoadResult(logical_path, LoadStatus.OK, value=cache.get(logical_path), origin="cache")

        generation = self.session.generation
        raw = self.session.resolve_bytes(logical_path)
        if not raw.found:
            return raw

        try:
            value = _PARSERS[kind](raw.value, logical_path)
        except ArtifactParseError as e:
            return LoadResult(logical_path, LoadStatus.PARSE_ERROR, error=e, origin=raw.origin)

        if self.session.generation == generation:
            cache.put(logical_path, value)
        else:
            self.logger.debug(f"Source changed while loading {logical_path}; not caching")
        return LoadResult(logical_path, LoadStatus.OK, value=value, origin=raw.origin)

    def load_table(self, logical_path: str) -> Optional[List[Row]]:
        """Return the rows of a CSV artifact, or None when it is absent.

        Raises:
            ArtifactParseError: the file exists but is not valid delimited text.
        """
        result = self.load(logical_path, ArtifactKind.TABLE)
        if result.status == LoadStatus.PARSE_ERROR:
            self.handle_error(result.error, context=logical_path)
            raise result.error
        return result.value if result.found else None

    def load_json(self, logical_path: str) -> Any:
        """Return the parsed JSON artifact; None when absent or malformed."""
        result = self.load(logical_path, ArtifactKind.JSON)
        if result.status == LoadStatus.PARSE_ERROR:
            self.handle_error(result.error, context=logical_path)
            return None
        return result.value if result.found else None
