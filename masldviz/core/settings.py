"""
Viewer configuration.

Values come from keyword overrides first, then ``MASLDVIZ_*`` environment
variables, then the defaults below.
"""

from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel, Field

# Probe order for the results root. Relative to ``origin``.
DEFAULT_CANDIDATE_ROOTS: List[str] = [
    "results",
    "masld_export/results",
    "../results",
    "./masld_export/results",
]

DEFAULT_ORIGIN = "http://127.0.0.1:8000/"


class ViewerSettings(BaseModel):
    origin: str = Field(DEFAULT_ORIGIN, description="URL that remote results paths are resolved against")
    candidate_roots: List[str] = Field(default_factory=lambda: list(DEFAULT_CANDIDATE_ROOTS))
    request_timeout: float = Field(10.0, gt=0)
    local_dir: Optional[str] = Field(None, description="Folder to load instead of probing the origin")
    verbose: bool = False

    @property
    def default_root(self) -> str:
        return self.candidate_roots[0] if self.candidate_roots else "results"

    @classmethod
    def from_env(cls, **overrides) -> "ViewerSettings":
        values = {}
        if os.getenv("MASLDVIZ_ORIGIN"):
            values["origin"] = os.environ["MASLDVIZ_ORIGIN"]
        if os.getenv("MASLDVIZ_CANDIDATE_ROOTS"):
            roots = [r.strip() for r in os.environ["MASLDVIZ_CANDIDATE_ROOTS"].split(",")]
            values["candidate_roots"] = [r for r in roots if r]
        if os.getenv("MASLDVIZ_REQUEST_TIMEOUT"):
            values["request_timeout"] = float(os.environ["MASLDVIZ_REQUEST_TIMEOUT"])
        if os.getenv("MASLDVIZ_LOCAL_DIR"):
            values["local_dir"] = os.environ["MASLDVIZ_LOCAL_DIR"]
        env_verbose = os.getenv("MASLDVIZ_VERBOSE", "").strip()
        if env_verbose:
            values["verbose"] = env_verbose not in ("0", "false", "False")
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
