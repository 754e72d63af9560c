"""
In-memory cache of parsed artifacts, keyed by logical path.
"""

from typing import Any, Dict, Iterator


class ArtifactCache:
    """Simple caching mechanism for parsed artifacts.

    Entries live until :meth:`clear`, which the session calls whenever the
    artifact source changes. Membership, not truthiness, decides a hit, so
    an empty table is cached like any other value.
    """

    def __init__(self):
        self._cache: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._cache.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cache)
