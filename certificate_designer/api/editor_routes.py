"""
Editor Routes
=============

API routes for certificate editing sessions: open/load, data sync,
save, and preview.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ..canvas.state_manager import StateManager
from ..models.certificate_models import CertificateData
from ..services.template_client import TemplateClient
from ..services.template_editor import EditorState, SaveResult, TemplateEditor

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/editor", tags=["editor"])

# Injected by server
state_manager: Optional[StateManager] = None
template_client: Optional[TemplateClient] = None


def get_state_manager() -> StateManager:
    """Dependency to get state manager."""
    if state_manager is None:
        raise HTTPException(500, "State manager not initialized")
    return state_manager


def get_template_client() -> TemplateClient:
    """Dependency to get template client."""
    if template_client is None:
        raise HTTPException(500, "Template client not initialized")
    return template_client


def get_editor(document_id: str, manager: StateManager = Depends(get_state_manager)) -> TemplateEditor:
    """Dependency to get the open editing session for a document."""
    editor = manager.get_editor(document_id)
    if editor is None:
        raise HTTPException(status_code=404, detail="Editor session not found")
    return editor


class DataSyncResponse(BaseModel):
    """Response for certificate data updates."""
    reapplied: bool
    state: EditorState


@router.post("/{document_id}/open")
async def open_editor(
    document_id: str,
    certificate_data: CertificateData,
    manager: StateManager = Depends(get_state_manager),
    client: TemplateClient = Depends(get_template_client)
) -> EditorState:
    """Open an editing session and load the saved or default layout."""
    editor = manager.open_editor(document_id, certificate_data, client)
    await editor.load_document()
    return editor.state()


@router.get("/{document_id}/state")
async def get_state(editor: TemplateEditor = Depends(get_editor)) -> EditorState:
    """Get the current editing state."""
    return editor.state()


@router.put("/{document_id}/data")
async def update_data(
    certificate_data: CertificateData,
    editor: TemplateEditor = Depends(get_editor)
) -> DataSyncResponse:
    """Replace the certificate record feeding the bound elements."""
    reapplied = editor.update_certificate_data(certificate_data)
    return DataSyncResponse(reapplied=reapplied, state=editor.state())


@router.post("/{document_id}/save")
async def save_template(editor: TemplateEditor = Depends(get_editor)) -> SaveResult:
    """Save the current layout as the certificate's template."""
    result = await editor.save()
    if result.rejected:
        raise HTTPException(status_code=409, detail=result.error)
    if not result.success:
        raise HTTPException(status_code=502, detail=f"Failed to save template: {result.error}")
    return result


@router.get("/{document_id}/preview", response_class=HTMLResponse)
async def preview_template(editor: TemplateEditor = Depends(get_editor)) -> HTMLResponse:
    """Render the current layout without saving it."""
    return HTMLResponse(content=editor.preview())


@router.delete("/{document_id}")
async def close_editor(document_id: str, manager: StateManager = Depends(get_state_manager)):
    """Close an editing session, discarding unsaved changes."""
    if not manager.close_editor(document_id):
        raise HTTPException(status_code=404, detail="Editor session not found")
    return {"message": "Editor closed", "document_id": document_id}
