"""
Element Routes
===============

API routes for canvas interaction: selection, dragging, field edits,
and the property inspector.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, Optional
from pydantic import BaseModel

from ..models.inspector_models import InspectorView
from ..services.template_editor import TemplateEditor
from .editor_routes import get_editor

router = APIRouter(prefix="/api/element", tags=["elements"])


class SelectRequest(BaseModel):
    """Request to change the selection."""
    element_id: Optional[str] = None


class DragStartRequest(BaseModel):
    """Pointer pressed on an element."""
    element_id: str
    pointer_x: float
    pointer_y: float


class DragMoveRequest(BaseModel):
    """Pointer moved over the canvas."""
    pointer_x: float
    pointer_y: float


class ContentRequest(BaseModel):
    """New element content."""
    content: str


class StyleRequest(BaseModel):
    """One style attribute to merge."""
    key: str
    value: Any


class GeometryRequest(BaseModel):
    """One size field; the value is parsed leniently."""
    field: str
    value: Any = None


class InspectorEditRequest(BaseModel):
    """Field edit coming from the inspector panel."""
    field: str
    value: Any = None


class ElementResponse(BaseModel):
    """Response for element operations."""
    element_id: Optional[str] = None
    element: Optional[Dict[str, Any]] = None
    selected_id: Optional[str] = None
    is_dragging: bool = False
    message: str


def _element_response(editor: TemplateEditor, element_id: Optional[str], message: str) -> ElementResponse:
    element = editor.canvas.get_element(element_id) if element_id else None
    return ElementResponse(
        element_id=element_id,
        element=element.to_wire() if element else None,
        selected_id=editor.session.selected_id,
        is_dragging=editor.session.drag.is_dragging,
        message=message
    )


@router.post("/{document_id}/select")
async def select_element(request: SelectRequest, editor: TemplateEditor = Depends(get_editor)) -> ElementResponse:
    """Select an element, or clear the selection with a null id."""
    if not editor.canvas.select_element(editor.session, request.element_id):
        raise HTTPException(status_code=404, detail="Element not found")
    return _element_response(editor, request.element_id, "Selection updated")


@router.post("/{document_id}/drag/start")
async def drag_start(request: DragStartRequest, editor: TemplateEditor = Depends(get_editor)) -> ElementResponse:
    """Begin dragging an element."""
    if not editor.canvas.begin_drag(editor.session, request.element_id, request.pointer_x, request.pointer_y):
        raise HTTPException(status_code=404, detail="Element not found")
    return _element_response(editor, request.element_id, "Drag started")


@router.post("/{document_id}/drag/move")
async def drag_move(request: DragMoveRequest, editor: TemplateEditor = Depends(get_editor)) -> ElementResponse:
    """Move the dragged element; ignored when no drag is active."""
    moved = editor.canvas.update_drag_position(editor.session, request.pointer_x, request.pointer_y)
    return _element_response(
        editor,
        editor.session.selected_id if moved else None,
        "Element moved" if moved else "No drag in progress"
    )


@router.post("/{document_id}/drag/end")
async def drag_end(editor: TemplateEditor = Depends(get_editor)) -> ElementResponse:
    """Release the pointer; safe to call repeatedly."""
    editor.canvas.end_drag(editor.session)
    return _element_response(editor, editor.session.selected_id, "Drag ended")


@router.put("/{document_id}/{element_id}/content")
async def update_content(
    element_id: str,
    request: ContentRequest,
    editor: TemplateEditor = Depends(get_editor)
) -> ElementResponse:
    """Overwrite an element's content."""
    if not editor.canvas.set_content(element_id, request.content):
        raise HTTPException(status_code=404, detail="Element not found")
    return _element_response(editor, element_id, "Content updated")


@router.put("/{document_id}/{element_id}/style")
async def update_style(
    element_id: str,
    request: StyleRequest,
    editor: TemplateEditor = Depends(get_editor)
) -> ElementResponse:
    """Merge one style attribute into an element."""
    if not editor.canvas.set_style(element_id, request.key, request.value):
        raise HTTPException(status_code=404, detail="Element not found")
    return _element_response(editor, element_id, "Style updated")


@router.put("/{document_id}/{element_id}/geometry")
async def update_geometry(
    element_id: str,
    request: GeometryRequest,
    editor: TemplateEditor = Depends(get_editor)
) -> ElementResponse:
    """Resize an element (width or height)."""
    if editor.canvas.get_element(element_id) is None:
        raise HTTPException(status_code=404, detail="Element not found")
    if not editor.canvas.set_geometry(element_id, request.field, request.value):
        raise HTTPException(status_code=400, detail=f"Field '{request.field}' cannot be resized")
    return _element_response(editor, element_id, "Geometry updated")


@router.get("/{document_id}/inspector")
async def get_inspector(editor: TemplateEditor = Depends(get_editor)) -> InspectorView:
    """Fields for the current selection."""
    return editor.inspector.describe()


@router.put("/{document_id}/inspector")
async def apply_inspector_edit(
    request: InspectorEditRequest,
    editor: TemplateEditor = Depends(get_editor)
) -> InspectorView:
    """Apply an inspector field edit to the selected element."""
    if not editor.inspector.apply_edit(request.field, request.value):
        raise HTTPException(status_code=400, detail=f"Edit of '{request.field}' rejected")
    return editor.inspector.describe()
