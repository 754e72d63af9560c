"""
Utilities for the results header – root discovery on startup and folder
selection from local disk.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import gradio as gr

from ..core.data_objects import UploadedFile
from ..core.session import DashboardSession
from .state import create_session

__all__ = [
    "create_load_data_controls",
    "load_results",
    "handle_folder_select",
    "uploads_from_paths",
    "status_html",
]


def status_html(message: str, ok: bool) -> str:
    color = "#2b8a3e" if ok else "#e74c3c"
    css_class = "success" if ok else "error"
    return f"<div id='loadStatus' class='{css_class}' style='color: {color}; font-weight: 600;'>{message}</div>"


def _upload_path(item: Any) -> Optional[str]:
    """Gradio hands back plain paths or file wrappers depending on version."""
    if item is None:
        return None
    if isinstance(item, (str, os.PathLike)):
        return str(item)
    return getattr(item, "path", None) or getattr(item, "name", None)


def uploads_from_paths(paths: Sequence[Any]) -> List[UploadedFile]:
    """Turn uploaded temp-file paths into :class:`UploadedFile` records.

    Paths are made relative to the deepest directory the uploads share and
    placed below a synthetic ``upload/`` folder, the shape a browser folder
    picker reports.
    """
    local_paths = [p for p in (_upload_path(item) for item in paths or []) if p]
    if not local_paths:
        return []

    common = os.path.commonpath([os.path.dirname(os.path.abspath(p)) for p in local_paths])
    uploads = []
    for local_path in local_paths:
        relative = Path(os.path.relpath(os.path.abspath(local_path), common)).as_posix()
        uploads.append(UploadedFile(relative_path=f"upload/{relative}", local_path=local_path))
    return uploads


def load_results(session: Optional[DashboardSession]) -> Tuple[DashboardSession, str]:
    """Initial load: use the configured local folder, else probe the remote roots."""
    session = session or create_session()

    local_dir = session.settings.local_dir
    if local_dir:
        try:
            source = session.load_local_dir(local_dir)
        except NotADirectoryError as e:
            return session, status_html(f"✗ {e}", ok=False)
        return session, status_html(f"✓ Loaded {len(source)} files from {local_dir}", ok=True)

    found = session.discover_root()
    if found is None:
        return session, status_html(
            "✗ Results folder not found. Please ensure 'results/' folder exists.", ok=False
        )
    return session, status_html(f"✓ Loaded: {found.base}/", ok=True)


def handle_folder_select(session: Optional[DashboardSession], files: Optional[Sequence[Any]]) -> Tuple[DashboardSession, str]:
    """Replace the active source with the files picked in the upload widget."""
    session = session or create_session()
    uploads = uploads_from_paths(files or [])
    if not uploads:
        return session, status_html("No files selected", ok=False)

    session.load_uploads(uploads)
    return session, status_html(f"✓ Loaded {len(uploads)} files", ok=True)


def create_load_data_controls() -> Tuple[gr.HTML, gr.File, gr.Button]:
    """Create the status line, folder picker and reload button."""
    with gr.Row():
        with gr.Column(scale=3):
            load_status = gr.HTML(status_html("Looking for results…", ok=True))
        with gr.Column(scale=1):
            reload_btn = gr.Button("Reload results", variant="secondary")
    folder_input = gr.File(
        label="Or select a results folder from disk",
        file_count="directory",
        type="filepath",
    )
    return load_status, folder_input, reload_btn
