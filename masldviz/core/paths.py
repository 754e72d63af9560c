"""
Path spelling helpers.

Files picked from a local folder carry inconsistent relative-path metadata
(browser uploads keep only the file name, Windows exports use backslashes,
some include the selected folder name), so lookups try several spellings of
the same logical path.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

__all__ = [
    "to_forward_slashes",
    "to_backslashes",
    "basename",
    "strip_base",
    "strip_first_component",
    "normalize_path_variants",
    "upload_keys",
]


def to_forward_slashes(path: str) -> str:
    return path.replace("\\", "/")


def to_backslashes(path: str) -> str:
    return path.replace("/", "\\")


def basename(path: str) -> str:
    """Return the bare file name regardless of separator style."""
    return to_forward_slashes(path).rsplit("/", 1)[-1]


def strip_base(path: str, base: Optional[str]) -> str:
    """Remove a leading results-root prefix such as ``results/`` from *path*.

    The returned value always uses forward slashes.
    """
    norm = to_forward_slashes(path)
    if not base:
        return norm
    prefix = to_forward_slashes(base).rstrip("/") + "/"
    if norm.startswith(prefix):
        return norm[len(prefix):]
    return norm


def strip_first_component(path: str) -> Optional[str]:
    """Drop the top-level folder of *path*, or return None for a bare name."""
    parts = to_forward_slashes(path).split("/")
    if len(parts) > 1:
        return "/".join(parts[1:])
    return None


def _dedupe(items: Iterable[Optional[str]]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            out.append(item)
    return out


def normalize_path_variants(path: str, base: Optional[str] = None) -> List[str]:
    """Return the candidate keys for *path*, in lookup priority order.

    Order: base-stripped path, forward-slash path, base-stripped path with
    backslashes, bare file name, original spelling.

    >>> normalize_path_variants("results\\\\shap_plots\\\\a.png", "results")
    ['shap_plots/a.png', 'results/shap_plots/a.png', 'shap_plots\\\\a.png', 'a.png', 'results\\\\shap_plots\\\\a.png']
    """
    stripped = strip_base(path, base)
    return _dedupe([
        stripped,
        to_forward_slashes(path),
        to_backslashes(stripped),
        basename(path),
        path,
    ])


def upload_keys(relative_path: str) -> List[str]:
    """Return the path spellings a single uploaded file is registered under.

    The bare file name is not included; uploads index it separately at a
    lower priority so that two files sharing a name never shadow a full
    path match.
    """
    forward = to_forward_slashes(relative_path)
    without_first = strip_first_component(forward)
    return _dedupe([
        without_first,
        without_first and to_backslashes(without_first),
        forward,
        to_backslashes(forward),
        relative_path,
    ])
