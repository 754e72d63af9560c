"""Command-line launcher for the MASLD results viewer.

Usage:
    python -m masldviz.vis_gradio.launcher --origin http://localhost:8000/
    python -m masldviz.vis_gradio.launcher --local_dir path/to/results
"""

import argparse
import logging
from typing import List, Optional

from .app import launch_app


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse MASLD model-evaluation results")
    parser.add_argument("--origin", default=None,
                        help="URL the results roots are resolved against (default: $MASLDVIZ_ORIGIN or http://127.0.0.1:8000/)")
    parser.add_argument("--local_dir", default=None,
                        help="Results folder on disk; skips probing the origin")
    parser.add_argument("--share", action="store_true", help="Create a public Gradio link")
    parser.add_argument("--server_name", default="127.0.0.1", help="Server address")
    parser.add_argument("--server_port", type=int, default=7860, help="Server port")
    parser.add_argument("--auto_port", action="store_true", help="Let Gradio pick a free port")
    parser.add_argument("--log_level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    launch_app(
        origin=args.origin,
        local_dir=args.local_dir,
        share=args.share,
        server_name=args.server_name,
        server_port=None if args.auto_port else args.server_port,
    )


if __name__ == "__main__":
    main()
