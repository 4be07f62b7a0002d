"""
Certificate Preview Renderer
============================

Renders a serialized element collection as a read-only HTML page.
Recognised style keys map to CSS directly; any other key is passed
through as a kebab-case CSS property.
"""

import html
import logging
import re
from typing import Any, Dict, List

from ..models.layout_models import (
    PAGE_HEIGHT, PAGE_WIDTH, STYLE_DEFAULTS, ElementKind, LayoutElement
)

logger = logging.getLogger(__name__)

# Style keys the renderer interprets itself
RECOGNISED_STYLE_KEYS = {
    "fontSize": "font-size",
    "fontWeight": "font-weight",
    "textAlign": "text-align",
    "lineHeight": "line-height",
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_UNSAFE_CSS = re.compile(r"[;{}<>]")


def css_property(key: str) -> str:
    """Convert a camelCase style key to its CSS property name."""
    if key in RECOGNISED_STYLE_KEYS:
        return RECOGNISED_STYLE_KEYS[key]
    return _CAMEL_BOUNDARY.sub("-", key).lower()


def _css_value(value: Any) -> str:
    return _UNSAFE_CSS.sub("", str(value))


class PreviewRenderer:
    """Builds standalone HTML previews of certificate layouts."""

    def __init__(self, page_width: int = PAGE_WIDTH, page_height: int = PAGE_HEIGHT):
        self.page_width = page_width
        self.page_height = page_height

    def render(self, elements: List[Dict[str, Any]], title: str = "Certificate Preview") -> str:
        """
        Render serialized elements to an HTML document.

        Args:
            elements: Elements in the persisted wire shape
            title: Document title

        Returns:
            Complete HTML string
        """
        parsed = [LayoutElement.model_validate(e) for e in elements]
        logger.info(f"[PREVIEW] Rendering {len(parsed)} elements")

        body = "\n".join(self._render_element(element) for element in parsed)
        return f'''<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
</head>
<body style="margin: 0; background: #f3f4f6;">
<div class="certificate-page" style="position: relative; width: {self.page_width}px; height: {self.page_height}px; margin: 0 auto; background: #ffffff; overflow: hidden;">
{body}
</div>
</body>
</html>'''

    def _box_style(self, element: LayoutElement) -> str:
        geometry = element.geometry
        parts = [
            "position: absolute",
            f"left: {geometry.x:g}px",
            f"top: {geometry.y:g}px",
            f"width: {geometry.width:g}px",
            f"height: {geometry.height:g}px",
        ]

        style = {**STYLE_DEFAULTS.get(element.kind, {}), **element.style}
        for key, value in style.items():
            if key == "objectFit" or value is None:
                continue
            parts.append(f"{css_property(key)}: {_css_value(value)}")
        return "; ".join(parts)

    def _render_element(self, element: LayoutElement) -> str:
        box_style = html.escape(self._box_style(element), quote=True)
        element_id = html.escape(element.id, quote=True)

        if element.kind == ElementKind.IMAGE:
            fit = html.escape(_css_value(element.style_value("objectFit")), quote=True)
            return f'''<div class="certificate-element" data-element-id="{element_id}" style="{box_style}">
    <img src="{html.escape(element.content, quote=True)}" alt="Certificate element" style="width: 100%; height: 100%; object-fit: {fit}; display: block;" />
</div>'''

        return f'''<div class="certificate-element" data-element-id="{element_id}" style="{box_style}">
    <div style="width: 100%; height: 100%; overflow: hidden; white-space: pre-wrap;">{html.escape(element.content)}</div>
</div>'''
