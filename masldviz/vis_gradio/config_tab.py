"""Logic for the **Configuration** tab."""
import json
from typing import Optional

import gradio as gr

from ..core.session import DashboardSession

__all__ = ["create_config_tab", "load_config"]

NO_CONFIG = "// run_config.json not available"


def load_config(session: Optional[DashboardSession]) -> str:
    if session is None:
        return NO_CONFIG
    config = session.load_json("run_config.json")
    if config is None:
        return NO_CONFIG
    return json.dumps(config, indent=2)


def create_config_tab() -> gr.Code:
    gr.Markdown("### Run Configuration")
    return gr.Code(value=NO_CONFIG, language="json", label="run_config.json", interactive=False)
