"""Logic for the **Calibration** tab – per-model reliability plots and summary table."""
from typing import Optional, Tuple

import gradio as gr

from ..core.manifest import CALIBRATION_MODELS, CALIBRATION_TYPES, calibration_plot_path
from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, image_html, table_html

__all__ = ["create_calibration_tab", "update_calibration_plot", "load_calibration"]


def update_calibration_plot(session: Optional[DashboardSession], model: str, plot_type: str) -> str:
    model = model or CALIBRATION_MODELS[0]
    plot_type = plot_type or CALIBRATION_TYPES[0]
    return image_html(
        session,
        "calibrationPlot",
        calibration_plot_path(model, plot_type),
        alt=f"{model} calibration ({plot_type})",
    )


def load_calibration(session: Optional[DashboardSession], model: str, plot_type: str) -> Tuple[str, str]:
    return (
        update_calibration_plot(session, model, plot_type),
        table_html(session, "calibration_summary.csv"),
    )


def create_calibration_tab() -> Tuple[gr.Dropdown, gr.Dropdown, gr.HTML, gr.HTML]:
    with gr.Row():
        model_dropdown = gr.Dropdown(
            label="Model",
            choices=CALIBRATION_MODELS,
            value=CALIBRATION_MODELS[0],
        )
        type_dropdown = gr.Dropdown(
            label="Probabilities",
            choices=CALIBRATION_TYPES,
            value=CALIBRATION_TYPES[0],
            info="Raw model scores or post-hoc calibrated probabilities",
        )
    calibration_plot = gr.HTML(NO_SESSION_HTML)
    gr.Markdown("### Calibration Summary")
    summary_table = gr.HTML(NO_SESSION_HTML)
    return model_dropdown, type_dropdown, calibration_plot, summary_table
