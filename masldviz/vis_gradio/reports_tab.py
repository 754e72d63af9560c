"""Logic for the **AI Reports** tab – report index and rendered case reports."""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import gradio as gr

from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, case_choices, case_id_from_choice, image_html, table_html

__all__ = [
    "REPORT_CASES",
    "create_reports_tab",
    "get_report_case_choices",
    "load_reports",
    "load_report_image",
]

REPORT_CASES = ["01", "02", "03", "04", "05", "06", "07", "08"]
REPORT_TEMPLATE = "ai_reports/Case-{case}.png"
SELECT_PROMPT = "<p style='color: #666; padding: 20px;'>Select a case report to view it</p>"


def get_report_case_choices(session: Optional[DashboardSession]) -> List[str]:
    return case_choices(session, REPORT_CASES, REPORT_TEMPLATE)


def load_reports(session: Optional[DashboardSession]) -> Tuple[str, Any, str]:
    return (
        table_html(session, "ai_reports/index.csv"),
        gr.update(choices=get_report_case_choices(session), value=None),
        SELECT_PROMPT,
    )


def load_report_image(session: Optional[DashboardSession], choice: Optional[str]) -> str:
    case = case_id_from_choice(choice)
    if case is None:
        return SELECT_PROMPT
    return image_html(session, "reportImage", REPORT_TEMPLATE.format(case=case), alt=f"AI report, case {case}")


def create_reports_tab() -> Tuple[gr.HTML, gr.Dropdown, gr.HTML]:
    gr.Markdown("### Report Index")
    index_table = gr.HTML(NO_SESSION_HTML)
    case_dropdown = gr.Dropdown(
        label="Select Case Report",
        choices=[],
        value=None,
    )
    report_image = gr.HTML(SELECT_PROMPT)
    return index_table, case_dropdown, report_image
