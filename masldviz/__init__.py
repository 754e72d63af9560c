"""
MASLD-Viz: Results viewer for MASLD model-evaluation exports

A small toolkit for browsing precomputed evaluation artifacts (metric
tables, run configuration and plots) either from a served results folder
or from a folder selected on local disk.
"""

from .core.session import DashboardSession
from .core.settings import ViewerSettings


__version__ = "0.1.0"
__all__ = [
    "DashboardSession",
    "ViewerSettings",
]
