"""Logic for the **SHAP** tab – global summary plot and per-case local explanations."""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import gradio as gr

from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, case_choices, case_id_from_choice, image_html

__all__ = [
    "SHAP_CASES",
    "create_shap_tab",
    "get_shap_case_choices",
    "load_shap",
    "load_shap_local",
]

SHAP_CASES = ["01", "02", "03", "04", "05", "06"]
SHAP_LOCAL_TEMPLATE = "shap_plots/shap_local_case_{case}.png"
SELECT_PROMPT = "<p style='color: #666; padding: 20px;'>Select a case to view its local explanation</p>"


def get_shap_case_choices(session: Optional[DashboardSession]) -> List[str]:
    return case_choices(session, SHAP_CASES, SHAP_LOCAL_TEMPLATE)


def load_shap(session: Optional[DashboardSession]) -> Tuple[str, Any, str]:
    return (
        image_html(session, "shapGlobal", "shap_plots/shap_global_summary.png", alt="SHAP global summary"),
        gr.update(choices=get_shap_case_choices(session), value=None),
        SELECT_PROMPT,
    )


def load_shap_local(session: Optional[DashboardSession], choice: Optional[str]) -> str:
    case = case_id_from_choice(choice)
    if case is None:
        return SELECT_PROMPT
    return image_html(session, "shapLocal", SHAP_LOCAL_TEMPLATE.format(case=case), alt=f"SHAP local explanation, case {case}")


def create_shap_tab() -> Tuple[gr.HTML, gr.Dropdown, gr.HTML]:
    gr.Markdown("### Global Feature Importance")
    global_plot = gr.HTML(NO_SESSION_HTML)
    gr.Markdown("### Local Explanations")
    case_dropdown = gr.Dropdown(
        label="Select Case",
        choices=[],
        value=None,
        info="Cases with a local SHAP plot",
    )
    local_plot = gr.HTML(SELECT_PROMPT)
    return global_plot, case_dropdown, local_plot
