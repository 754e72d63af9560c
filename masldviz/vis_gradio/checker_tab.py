"""Logic for the **File Checker** tab."""
from __future__ import annotations

import html
from typing import Optional

import gradio as gr

from ..core.manifest import check_expected_files
from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML

__all__ = ["create_checker_tab", "load_file_checker"]


def _errors_html(session: DashboardSession) -> str:
    if not session.errors:
        return ""
    items = "".join(
        f"<li><code>{html.escape(str(err['context']))}</code>: {html.escape(str(err['error']))}</li>"
        for err in session.errors
    )
    return f"""
        <div style="background: #fff5f5; padding: 15px; border-radius: 8px; margin: 15px 0;">
            <h4>Load errors this session</h4>
            <ul>{items}</ul>
        </div>
    """


def load_file_checker(session: Optional[DashboardSession]) -> str:
    if session is None:
        return NO_SESSION_HTML

    source = (
        f"{len(session.upload)} uploaded files" if session.has_uploads
        else html.escape(session.url_for(""))
    )
    out = f"""
    <div style="max-width: 1000px; margin: 0 auto;">
        <p style="color: #666;">Checking against: <strong>{source}</strong></p>
    """

    for category, results in check_expected_files(session).items():
        out += f"<h3>{html.escape(category)}</h3>"
        out += '<div class="table-container">'
        for path, present in results:
            css_class = "present" if present else "missing"
            color = "#2b8a3e" if present else "#e74c3c"
            label = "✓ Present" if present else "✗ Missing"
            out += f"""
            <div class="file-status {css_class}" style="display:flex; justify-content:space-between; padding:6px 10px; border-bottom:1px solid #eee;">
                <span><code>{html.escape(path)}</code></span>
                <span style="color: {color}; font-weight: 600;">{label}</span>
            </div>"""
        out += "</div>"

    out += _errors_html(session)
    out += "</div>"
    return out


def create_checker_tab() -> gr.HTML:
    gr.Markdown("### Expected Files")
    gr.Markdown("Checks which of the expected export files are available from the current source.")
    return gr.HTML(NO_SESSION_HTML)
