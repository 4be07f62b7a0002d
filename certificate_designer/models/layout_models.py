"""
Layout Models for Certificate Designer
=======================================

Models for page geometry, positioned elements, and template documents.
"""

from enum import Enum
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator

# Canonical page size (A4 at 72dpi-equivalent scale)
PAGE_WIDTH = 595
PAGE_HEIGHT = 842


class ElementKind(str, Enum):
    """Kind of content an element renders."""
    TEXT = "text"
    IMAGE = "image"


# Fallbacks for style keys an element does not set
STYLE_DEFAULTS: Dict[ElementKind, Dict[str, Any]] = {
    ElementKind.TEXT: {
        "fontSize": "12px",
        "fontWeight": "normal",
        "textAlign": "left",
    },
    ElementKind.IMAGE: {
        "objectFit": "contain",
    },
}


class Geometry(BaseModel):
    """Position and size in document-space pixels."""
    x: float = Field(default=0, ge=0)
    y: float = Field(default=0, ge=0)
    width: float = Field(default=0, ge=0)
    height: float = Field(default=0, ge=0)


class LayoutElement(BaseModel):
    """A positioned, styled unit of content on the page."""
    id: str = Field(frozen=True)
    kind: ElementKind = Field(frozen=True)
    content: str = ""
    geometry: Geometry = Field(default_factory=Geometry)
    style: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_shape(cls, data: Any) -> Any:
        """Accept the flat {type, x, y, width, height} shape saved by the dashboard."""
        if not isinstance(data, dict) or "geometry" in data:
            return data

        data = dict(data)
        if "kind" not in data and "type" in data:
            data["kind"] = data.pop("type")
        data["geometry"] = {
            key: data.pop(key)
            for key in ("x", "y", "width", "height")
            if key in data
        }
        if data.get("style") is None:
            data["style"] = {}
        if data.get("content") is None:
            data["content"] = ""
        return data

    def style_value(self, key: str) -> Any:
        """Get a style attribute, falling back to the kind's default."""
        if key in self.style:
            return self.style[key]
        return STYLE_DEFAULTS.get(self.kind, {}).get(key)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the persisted {id, kind, content, geometry, style} shape."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "content": self.content,
            "geometry": self.geometry.model_dump(),
            "style": dict(self.style),
        }


class TemplateDocument(BaseModel):
    """The template_data body exchanged with the backend."""
    elements: List[LayoutElement] = Field(default_factory=list)
    is_saved_template: bool = False


class DragState(BaseModel):
    """Pointer drag in progress on the canvas."""
    is_dragging: bool = False
    offset_x: float = 0
    offset_y: float = 0


class EditorSession(BaseModel):
    """Interaction state for one document editing session."""
    selected_id: Optional[str] = None
    drag: DragState = Field(default_factory=DragState)

    def reset(self) -> None:
        """Clear selection and any drag in progress."""
        self.selected_id = None
        self.drag = DragState()
