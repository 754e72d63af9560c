"""Logic for the **Uncertainty & Coverage** tab."""
from typing import Optional, Tuple

import gradio as gr

from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, image_html, table_html

__all__ = ["create_uncertainty_tab", "load_uncertainty"]


def load_uncertainty(session: Optional[DashboardSession]) -> Tuple[str, str, str]:
    return (
        table_html(session, "cnn_uncertainty_patientlevel.csv"),
        table_html(session, "coverage_vs_performance.csv"),
        image_html(session, "coverageCurveImg", "coverage_curve.png", alt="Coverage vs performance"),
    )


def create_uncertainty_tab() -> Tuple[gr.HTML, gr.HTML, gr.HTML]:
    gr.Markdown("### CNN Uncertainty (patient level)")
    uncertainty_table = gr.HTML(NO_SESSION_HTML)
    gr.Markdown("### Coverage vs Performance")
    with gr.Row():
        with gr.Column():
            coverage_table = gr.HTML(NO_SESSION_HTML)
        with gr.Column():
            coverage_image = gr.HTML(NO_SESSION_HTML)
    return uncertainty_table, coverage_table, coverage_image
