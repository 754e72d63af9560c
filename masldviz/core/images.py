"""
Resolve image artifacts to a URI the browser can display.

Uploaded images are inlined as base64 data URIs. Anything else is left to
the browser: the ``<img>`` points at the remote URL and its ``onerror``
handler swaps in a placeholder when the file is missing.
"""

from __future__ import annotations

import base64
import html
import mimetypes
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .session import DashboardSession

__all__ = ["ImageRef", "resolve_image_uri", "to_data_uri", "render_image_html"]


@dataclass(frozen=True)
class ImageRef:
    path: str
    uri: Optional[str]
    origin: str  # "upload", "remote" or "error"

    @property
    def failed(self) -> bool:
        return self.uri is None


def to_data_uri(data: bytes, filename: str) -> str:
    mime, _ = mimetypes.guess_type(filename)
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime or 'image/png'};base64,{encoded}"


def resolve_image_uri(session: "DashboardSession", logical_path: str) -> ImageRef:
    if session.upload:
        uploaded = session.upload.lookup(logical_path)
        if uploaded is not None:
            try:
                data = uploaded.read_bytes()
            except OSError as e:
                session.log(f"Could not read uploaded image {uploaded.relative_path}: {e}", level="warning")
                return ImageRef(logical_path, None, "error")
            return ImageRef(logical_path, to_data_uri(data, uploaded.name), "upload")
    return ImageRef(logical_path, session.url_for(logical_path), "remote")


def render_image_html(element_id: str, ref: ImageRef, alt: str = "", message: str = "Image not available") -> str:
    """Render an image plus its hidden ``{element_id}Error`` placeholder.

    Every render starts with the image visible and the placeholder hidden,
    so re-rendering after a failed load clears the old error state.
    """
    error_id = f"{element_id}Error"
    placeholder_style = "display:none;" if not ref.failed else "display:block;"
    placeholder = (
        f"<div id='{error_id}' class='image-error' style='{placeholder_style} color:#999; "
        f"padding:20px; border:1px dashed #ccc; border-radius:6px; text-align:center;'>"
        f"{html.escape(message)}: <code>{html.escape(ref.path)}</code></div>"
    )
    if ref.failed:
        return placeholder

    onerror = (
        "this.style.display='none';"
        f"var e=document.getElementById('{error_id}');if(e){{e.style.display='block';}}"
    )
    img = (
        f"<img id='{element_id}' src=\"{html.escape(ref.uri, quote=True)}\" alt=\"{html.escape(alt or ref.path, quote=True)}\" "
        f"style='display:block; max-width:100%; height:auto;' onerror=\"{onerror}\">"
    )
    return img + placeholder
