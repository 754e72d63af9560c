"""
Utility functions for the Gradio results viewer.

HTML builders shared by the page modules: generic tables, stat cards,
images, and the safe-loading wrappers every page goes through.
"""

import html
import logging
from typing import Any, Dict, List, Optional, Sequence

from ..core.images import render_image_html, resolve_image_uri
from ..core.loaders import ArtifactParseError
from ..core.session import DashboardSession

logger = logging.getLogger(__name__)

NO_DATA_HTML = "<p>No data available</p>"
NO_SESSION_HTML = "<p style='color: #666; padding: 20px;'>Load results to view this page</p>"

TABLE_STYLE = """
<style>
.results-table { border-collapse: collapse; width: 100%; font-size: 13px; }
.results-table th, .results-table td { padding: 6px 10px; border: 1px solid #ddd; text-align: left; }
.results-table th { background: #f1f3f5; }
</style>
"""


def create_table_html(rows: Optional[Sequence[Dict[str, Any]]]) -> str:
    """Render rows as an HTML table whose columns follow the first row's keys."""
    if not rows:
        return NO_DATA_HTML

    headers = list(rows[0].keys())
    parts = ["<table class='results-table'><thead><tr>"]
    for header in headers:
        parts.append(f"<th>{html.escape(str(header))}</th>")
    parts.append("</tr></thead><tbody>")

    for row in rows:
        parts.append("<tr>")
        for header in headers:
            value = row.get(header)
            cell = "" if value is None else str(value)
            parts.append(f"<td>{html.escape(cell)}</td>")
        parts.append("</tr>")

    parts.append("</tbody></table>")
    return "".join(parts)


def safe_load_table(session: DashboardSession, logical_path: str) -> Optional[List[Dict[str, str]]]:
    """Load a table, treating a parse failure the same as a missing file."""
    try:
        return session.load_table(logical_path)
    except ArtifactParseError as e:
        logger.warning(f"Failed to load {logical_path}: {e}")
        return None


def table_html(session: Optional[DashboardSession], logical_path: str) -> str:
    if session is None:
        return NO_SESSION_HTML
    return TABLE_STYLE + create_table_html(safe_load_table(session, logical_path))


def image_html(session: Optional[DashboardSession], element_id: str, logical_path: str, alt: str = "") -> str:
    if session is None:
        return NO_SESSION_HTML
    return render_image_html(element_id, resolve_image_uri(session, logical_path), alt=alt)


def stat_card_html(label: str, value: Any) -> str:
    return f"""
    <div style="flex:1; min-width:160px; background:#f8f9fa; padding:15px; border-radius:8px; text-align:center;">
        <div style="font-size:28px; font-weight:700; color:#4c6ef5;">{html.escape(str(value))}</div>
        <div style="color:#666; margin-top:4px;">{html.escape(label)}</div>
    </div>
    """


def stat_cards_html(stats: Dict[str, Any]) -> str:
    cards = "".join(stat_card_html(label, value) for label, value in stats.items())
    return f"<div style='display:flex; gap:12px; flex-wrap:wrap; margin-bottom:15px;'>{cards}</div>"


def case_choices(session: Optional[DashboardSession], case_ids: Sequence[str], path_template: str) -> List[str]:
    """Return ``Case-NN`` dropdown labels.

    With uploaded files only cases whose file exists are offered; a remote
    source offers them all and lets the image placeholder report misses.
    """
    if session is not None and session.has_uploads:
        case_ids = [c for c in case_ids if session.upload.lookup(path_template.format(case=c)) is not None]
    return [f"Case-{c}" for c in case_ids]


def case_id_from_choice(choice: Optional[str]) -> Optional[str]:
    if not choice or not choice.startswith("Case-"):
        return None
    return choice[len("Case-"):]
