"""
Property Inspector
==================

Side panel bound to the selected element (or to the document when
nothing is selected). Describes the fields to render and writes edits
straight back into the layout canvas.
"""

import logging
from typing import Any, Dict, List, Optional

from ..models.inspector_models import (
    FieldKind, FontWeight, InspectorField, InspectorMode, InspectorView, TextAlign
)
from ..models.layout_models import (
    PAGE_HEIGHT, PAGE_WIDTH, EditorSession, ElementKind, LayoutElement
)
from .layout_canvas import RESIZABLE_FIELDS, LayoutCanvas

logger = logging.getLogger(__name__)

FONT_WEIGHTS = [w.value for w in FontWeight]
TEXT_ALIGNS = [a.value for a in TextAlign]

# Editable fields exposed per element kind
EDITABLE_FIELDS: Dict[ElementKind, List[str]] = {
    ElementKind.TEXT: ["content", "fontSize", "fontWeight", "textAlign", "width", "height"],
    ElementKind.IMAGE: ["width", "height"],
}


class PropertyInspector:
    """
    Inspector bound to one editing session.

    Usage:
        inspector = PropertyInspector(canvas, session, document_id="42")
        view = inspector.describe()
        inspector.apply_edit("fontWeight", "bold")
    """

    def __init__(self, canvas: LayoutCanvas, session: EditorSession, document_id: str = ""):
        self.canvas = canvas
        self.session = session
        self.document_id = document_id

    @property
    def selected(self) -> Optional[LayoutElement]:
        if self.session.selected_id is None:
            return None
        return self.canvas.get_element(self.session.selected_id)

    def describe(self) -> InspectorView:
        element = self.selected
        if element is None:
            return self._describe_document()
        if element.kind == ElementKind.IMAGE:
            return self._describe_image(element)
        return self._describe_text(element)

    def _describe_document(self) -> InspectorView:
        fields = [
            InspectorField(name="document_id", label="Document", kind=FieldKind.READONLY,
                           value=self.document_id),
            InspectorField(name="page_width", label="Page width", kind=FieldKind.READONLY,
                           value=PAGE_WIDTH),
            InspectorField(name="page_height", label="Page height", kind=FieldKind.READONLY,
                           value=PAGE_HEIGHT),
            InspectorField(name="element_count", label="Elements", kind=FieldKind.READONLY,
                           value=len(self.canvas)),
            InspectorField(name="manually_edited_count", label="Manually edited",
                           kind=FieldKind.READONLY, value=len(self.canvas.manually_edited)),
        ]
        return InspectorView(mode=InspectorMode.DOCUMENT, title="Certificate Editor", fields=fields)

    def _size_fields(self, element: LayoutElement) -> List[InspectorField]:
        return [
            InspectorField(name="width", label="Width", kind=FieldKind.NUMBER,
                           value=int(element.geometry.width)),
            InspectorField(name="height", label="Height", kind=FieldKind.NUMBER,
                           value=int(element.geometry.height)),
        ]

    def _describe_text(self, element: LayoutElement) -> InspectorView:
        fields = [
            InspectorField(name="content", label="Content", kind=FieldKind.TEXTAREA,
                           value=element.content),
            InspectorField(name="fontSize", label="Font Size", kind=FieldKind.TEXT,
                           value=element.style_value("fontSize")),
            InspectorField(name="fontWeight", label="Font Weight", kind=FieldKind.SELECT,
                           value=element.style_value("fontWeight"), options=FONT_WEIGHTS),
            InspectorField(name="textAlign", label="Text Align", kind=FieldKind.SELECT,
                           value=element.style_value("textAlign"), options=TEXT_ALIGNS),
        ]
        fields.extend(self._size_fields(element))
        return InspectorView(
            mode=InspectorMode.TEXT,
            element_id=element.id,
            title=f"Editing: {element.id.replace('-', ' ')}",
            fields=fields
        )

    def _describe_image(self, element: LayoutElement) -> InspectorView:
        fields = self._size_fields(element)
        fields.append(InspectorField(name="objectFit", label="Fit", kind=FieldKind.READONLY,
                                     value=element.style_value("objectFit")))
        return InspectorView(
            mode=InspectorMode.IMAGE,
            element_id=element.id,
            title=f"Editing: {element.id.replace('-', ' ')}",
            fields=fields
        )

    def apply_edit(self, field: str, value: Any) -> bool:
        """
        Write one field edit into the canvas.

        Returns:
            False when there is no selection, the field is not exposed for
            the selected kind, or the value fails validation
        """
        element = self.selected
        if element is None:
            logger.warning(f"[INSPECTOR] Edit of '{field}' ignored: nothing selected")
            return False
        if field not in EDITABLE_FIELDS[element.kind]:
            logger.warning(f"[INSPECTOR] Field '{field}' is not editable on {element.kind.value} elements")
            return False

        if field == "content":
            return self.canvas.set_content(element.id, "" if value is None else str(value))

        if field in RESIZABLE_FIELDS:
            return self.canvas.set_geometry(element.id, field, value)

        if field == "fontSize":
            text = "" if value is None else str(value).strip()
            if not text:
                return False
            return self.canvas.set_style(element.id, field, text)

        allowed = FONT_WEIGHTS if field == "fontWeight" else TEXT_ALIGNS
        if value not in allowed:
            logger.warning(f"[INSPECTOR] Rejected {field}={value!r}, expected one of {allowed}")
            return False
        return self.canvas.set_style(element.id, field, value)
