"""
Main Gradio application for browsing MASLD model-evaluation results.

This module assembles the dashboard pages and wires their events. Every
browser tab gets its own DashboardSession (held in a ``gr.State``), created
on page load by root discovery or by the configured local folder.
"""

import os
from typing import Optional
from urllib.parse import urlparse

import gradio as gr

from ..core.settings import ViewerSettings
from .state import set_settings
from .load_data_tab import create_load_data_controls, load_results, handle_folder_select
from .overview_tab import create_overview_tab, load_overview
from .metrics_tab import create_metrics_tab, load_metrics
from .calibration_tab import create_calibration_tab, load_calibration, update_calibration_plot
from .uncertainty_tab import create_uncertainty_tab, load_uncertainty
from .shap_tab import create_shap_tab, load_shap, load_shap_local
from .reports_tab import create_reports_tab, load_reports, load_report_image
from .config_tab import create_config_tab, load_config
from .checker_tab import create_checker_tab, load_file_checker


LOOPBACK_HOSTS = {"127.0.0.1", "localhost", "::1"}


def images_unreachable(origin: str, share: bool, server_name: str) -> bool:
    """True when viewers on other machines cannot load remote images.

    Tables are fetched by the server, but remote images are loaded by each
    viewer's browser straight from ``origin``.
    """
    if urlparse(origin).hostname not in LOOPBACK_HOSTS:
        return False
    return share or server_name not in LOOPBACK_HOSTS


def create_app() -> gr.Blocks:
    """Create the main Gradio application."""

    with gr.Blocks(title="MASLD Model Evaluation Results", theme=gr.themes.Soft()) as app:
        gr.Markdown("""
        ## 🩺 MASLD Model Evaluation Results

        Results are loaded from the served `results/` folder when available. You can also pick an exported results folder from disk.
        """)

        session_state = gr.State(None)
        load_status, folder_input, reload_btn = create_load_data_controls()

        with gr.Tabs():
            with gr.TabItem("📊 Overview") as overview_tab:
                overview_outputs = list(create_overview_tab())

            with gr.TabItem("📈 Metrics") as metrics_tab:
                metrics_outputs = list(create_metrics_tab())

            with gr.TabItem("🎯 Calibration") as calibration_tab:
                cal_model, cal_type, cal_plot, cal_summary = create_calibration_tab()

            with gr.TabItem("📉 Uncertainty & Coverage") as uncertainty_tab:
                uncertainty_outputs = list(create_uncertainty_tab())

            with gr.TabItem("🔍 SHAP") as shap_tab:
                shap_global, shap_case, shap_local = create_shap_tab()

            with gr.TabItem("📝 AI Reports") as reports_tab:
                reports_index, report_case, report_image = create_reports_tab()

            with gr.TabItem("⚙️ Configuration") as config_tab:
                config_display = create_config_tab()

            with gr.TabItem("✅ File Checker") as checker_tab:
                checker_display = create_checker_tab()

        # Any source change refreshes the overview
        app.load(
            fn=load_results,
            inputs=[session_state],
            outputs=[session_state, load_status],
        ).then(
            fn=load_overview,
            inputs=[session_state],
            outputs=overview_outputs,
        )

        reload_btn.click(
            fn=load_results,
            inputs=[session_state],
            outputs=[session_state, load_status],
        ).then(
            fn=load_overview,
            inputs=[session_state],
            outputs=overview_outputs,
        )

        folder_input.upload(
            fn=handle_folder_select,
            inputs=[session_state, folder_input],
            outputs=[session_state, load_status],
        ).then(
            fn=load_overview,
            inputs=[session_state],
            outputs=overview_outputs,
        )

        # Page loads on navigation
        overview_tab.select(fn=load_overview, inputs=[session_state], outputs=overview_outputs)
        metrics_tab.select(fn=load_metrics, inputs=[session_state], outputs=metrics_outputs)
        calibration_tab.select(
            fn=load_calibration,
            inputs=[session_state, cal_model, cal_type],
            outputs=[cal_plot, cal_summary],
        )
        uncertainty_tab.select(fn=load_uncertainty, inputs=[session_state], outputs=uncertainty_outputs)
        shap_tab.select(fn=load_shap, inputs=[session_state], outputs=[shap_global, shap_case, shap_local])
        reports_tab.select(fn=load_reports, inputs=[session_state], outputs=[reports_index, report_case, report_image])
        config_tab.select(fn=load_config, inputs=[session_state], outputs=[config_display])
        checker_tab.select(fn=load_file_checker, inputs=[session_state], outputs=[checker_display])

        # Selection-driven updates
        cal_model.change(fn=update_calibration_plot, inputs=[session_state, cal_model, cal_type], outputs=[cal_plot])
        cal_type.change(fn=update_calibration_plot, inputs=[session_state, cal_model, cal_type], outputs=[cal_plot])
        shap_case.change(fn=load_shap_local, inputs=[session_state, shap_case], outputs=[shap_local])
        report_case.change(fn=load_report_image, inputs=[session_state, report_case], outputs=[report_image])

    return app


def launch_app(origin: Optional[str] = None,
               local_dir: Optional[str] = None,
               share: bool = False,
               server_name: str = "127.0.0.1",
               server_port: Optional[int] = 7860,
               **kwargs) -> None:
    """Launch the Gradio application.

    Args:
        origin: URL the remote results roots are resolved against
        local_dir: Optional results folder on disk to serve instead of probing ``origin``
        share: Whether to create a public link
        server_name: Server address
        server_port: Server port (None lets Gradio pick a free one)
        **kwargs: Additional arguments for gr.Blocks.launch()
    """
    settings = ViewerSettings.from_env(origin=origin, local_dir=local_dir)

    if settings.local_dir and not os.path.isdir(settings.local_dir):
        print(f"⚠️  Warning: results directory does not exist: {settings.local_dir}")
        settings = settings.model_copy(update={"local_dir": None})

    set_settings(settings)
    if settings.local_dir:
        print(f"📁 Results directory set to: {settings.local_dir}")
    else:
        print(f"🌐 Probing results roots under {settings.origin}: {', '.join(settings.candidate_roots)}")
        if images_unreachable(settings.origin, share, server_name):
            print(f"⚠️  Warning: images are loaded by each viewer's browser from {settings.origin}, "
                  "which other machines cannot reach. Pass --origin with a public address.")

    app = create_app()

    print(f"🚀 Launching Gradio app on {server_name}:{server_port}")
    print(f"Share mode: {share}")

    try:
        app.launch(
            share=share,
            server_name=server_name,
            server_port=server_port,
            show_error=True,
            **kwargs
        )
    except OSError as e:
        print(f"❌ Failed to launch on port {server_port}: {e}")
        print("🔄 Trying alternative port configuration...")

        for alt_port in range(8080, 8090):
            try:
                print(f"🔄 Trying port {alt_port}...")
                app.launch(
                    share=share,
                    server_name=server_name,
                    server_port=alt_port,
                    show_error=True,
                    **kwargs
                )
                break
            except OSError as port_error:
                if "Cannot find empty port" in str(port_error):
                    print(f"   Port {alt_port} is busy, trying next...")
                    continue
                raise
        else:
            print("💡 Try specifying a different port manually:")
            print("   python -m masldviz.vis_gradio.launcher --server_port 9000")
            print("   python -m masldviz.vis_gradio.launcher --auto_port")
            raise OSError("All attempted ports (8080-8089) are busy")


__all__ = ["create_app", "launch_app"]
