"""
Template Editor
===============

Orchestrates one certificate editing session: loading the saved layout
(or the default one), keeping bound elements in sync with the
certificate record, saving, and previewing.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field, ValidationError

from ..canvas.default_template import build_default_elements
from ..canvas.inspector import PropertyInspector
from ..canvas.layout_canvas import LayoutCanvas
from ..models.certificate_models import CertificateData
from ..models.layout_models import EditorSession, TemplateDocument
from .preview_renderer import PreviewRenderer
from .template_client import TemplateClient

logger = logging.getLogger(__name__)


class LoadSource(str, Enum):
    """Where the current element collection came from."""
    SAVED = "saved"
    DEFAULT = "default"


class SaveResult(BaseModel):
    """Outcome of a save request."""
    success: bool
    rejected: bool = False
    element_count: int = 0
    error: Optional[str] = None


class EditorState(BaseModel):
    """Snapshot of an editing session for the front-end."""
    document_id: str
    elements: List[Dict[str, Any]] = Field(default_factory=list)
    selected_id: Optional[str] = None
    is_dragging: bool = False
    is_loading: bool = False
    is_saving: bool = False
    load_source: Optional[LoadSource] = None
    manually_edited: List[str] = Field(default_factory=list)


class TemplateEditor:
    """
    Editing session for one certificate template.

    Usage:
        editor = TemplateEditor("42", CertificateData(clientName="ABC Corp"), client)
        await editor.load_document()
        editor.canvas.begin_drag(editor.session, "title", 30, 60)
        result = await editor.save()
    """

    def __init__(
        self,
        document_id: str,
        certificate_data: CertificateData,
        client: TemplateClient,
        renderer: Optional[PreviewRenderer] = None,
        saving_documents: Optional[Set[str]] = None
    ):
        self.document_id = document_id
        self.certificate_data = certificate_data
        self.client = client
        self.renderer = renderer or PreviewRenderer()
        self.canvas = LayoutCanvas()
        self.session = EditorSession()
        self.inspector = PropertyInspector(self.canvas, self.session, document_id=document_id)
        self.is_loading = False
        self.load_source: Optional[LoadSource] = None
        # Document ids with a save in flight, shared by every session a StateManager opens
        self._saving_documents = saving_documents if saving_documents is not None else set()

    @property
    def is_saving(self) -> bool:
        return self.document_id in self._saving_documents

    def _load_defaults(self) -> LoadSource:
        logger.info(f"[TEMPLATE-EDITOR] Loading default template for certification {self.document_id}")
        self.canvas.load_elements(build_default_elements(self.certificate_data))
        self.load_source = LoadSource.DEFAULT
        return self.load_source

    async def load_document(self) -> LoadSource:
        """
        Replace the element collection with the saved layout, or with the
        default template when none is saved or the fetch fails.

        Saved layouts are used verbatim; bindings are not re-applied.
        """
        self.is_loading = True
        self.session.reset()
        try:
            fetched = await self.client.fetch_template(self.document_id)

            if not fetched.success:
                logger.error(
                    f"[TEMPLATE-EDITOR] Unexpected error loading template for "
                    f"{self.document_id}, falling back to defaults: {fetched.error}"
                )
                return self._load_defaults()

            if not fetched.found:
                logger.info(f"[TEMPLATE-EDITOR] Template not found for {self.document_id} (first time use)")
                return self._load_defaults()

            try:
                document = TemplateDocument.model_validate(fetched.template_data)
            except ValidationError as e:
                logger.error(f"[TEMPLATE-EDITOR] Malformed saved template for {self.document_id}: {e}")
                return self._load_defaults()

            if not (document.is_saved_template and document.elements):
                logger.info(f"[TEMPLATE-EDITOR] No saved template for {self.document_id}, using defaults")
                return self._load_defaults()

            try:
                self.canvas.load_elements(document.elements)
            except ValueError as e:
                logger.error(f"[TEMPLATE-EDITOR] Invalid saved template for {self.document_id}: {e}")
                return self._load_defaults()

            logger.info(f"[TEMPLATE-EDITOR] Loaded saved template: {len(document.elements)} elements")
            self.load_source = LoadSource.SAVED
            return self.load_source
        finally:
            self.is_loading = False

    def update_certificate_data(self, data: CertificateData) -> bool:
        """
        Replace the certificate record and re-derive bound content when it changed.

        Returns:
            True if bindings were re-applied
        """
        if data == self.certificate_data:
            return False
        self.certificate_data = data
        self.canvas.reapply_bindings(data)
        return True

    async def save(self) -> SaveResult:
        """
        Persist the current elements as this certificate's saved template.

        Rejected without a request while the template is still loading, or
        while another save for the same document is in flight.
        """
        if self.is_loading:
            logger.warning(f"[TEMPLATE-EDITOR] Template for {self.document_id} is still loading, ignoring save")
            return SaveResult(success=False, rejected=True, error="Template is still loading")

        if self.is_saving:
            logger.warning(f"[TEMPLATE-EDITOR] Save already in progress for {self.document_id}, ignoring")
            return SaveResult(success=False, rejected=True, error="Save already in progress")

        self._saving_documents.add(self.document_id)
        try:
            elements = self.canvas.serialize()
            response = await self.client.save_template(self.document_id, elements)
            if not response.success:
                logger.error(f"[TEMPLATE-EDITOR] Failed to save template for {self.document_id}: {response.error}")
                return SaveResult(success=False, element_count=len(elements), error=response.error)

            self.load_source = LoadSource.SAVED
            return SaveResult(success=True, element_count=len(elements))
        finally:
            self._saving_documents.discard(self.document_id)

    def preview(self) -> str:
        """Render the current, possibly unsaved, elements."""
        return self.renderer.render(
            self.canvas.serialize(),
            title=f"Certificate Preview - {self.certificate_data.client_name or self.document_id}"
        )

    def state(self) -> EditorState:
        return EditorState(
            document_id=self.document_id,
            elements=self.canvas.serialize(),
            selected_id=self.session.selected_id,
            is_dragging=self.session.drag.is_dragging,
            is_loading=self.is_loading,
            is_saving=self.is_saving,
            load_source=self.load_source,
            manually_edited=sorted(self.canvas.manually_edited)
        )
