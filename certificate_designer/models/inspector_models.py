"""
Inspector Models for Certificate Designer
==========================================

Field descriptions rendered by the property inspector panel.
"""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class FontWeight(str, Enum):
    """Font weights offered for text elements."""
    NORMAL = "normal"
    BOLD = "bold"
    LIGHTER = "lighter"


class TextAlign(str, Enum):
    """Text alignment within an element box."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class FieldKind(str, Enum):
    """Editor widget used for a field."""
    TEXTAREA = "textarea"
    TEXT = "text"
    SELECT = "select"
    NUMBER = "number"
    READONLY = "readonly"


class InspectorMode(str, Enum):
    """What the inspector is bound to."""
    DOCUMENT = "document"
    TEXT = "text"
    IMAGE = "image"


class InspectorField(BaseModel):
    """A single editable (or read-only) field in the inspector."""
    name: str
    label: str
    kind: FieldKind
    value: Any = None
    options: Optional[List[str]] = None


class InspectorView(BaseModel):
    """Inspector contents for the current selection."""
    mode: InspectorMode
    element_id: Optional[str] = None
    title: str
    fields: List[InspectorField] = Field(default_factory=list)

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]
