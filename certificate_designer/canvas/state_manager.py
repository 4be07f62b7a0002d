"""
Editor State Manager
====================

Keeps one template editing session per certification for the lifetime
of the process.
"""

import logging
from typing import Dict, List, Optional, Set

from ..models.certificate_models import CertificateData
from ..services.preview_renderer import PreviewRenderer
from ..services.template_client import TemplateClient
from ..services.template_editor import TemplateEditor

logger = logging.getLogger(__name__)


class StateManager:
    """Manages template editor sessions keyed by document id."""

    def __init__(self, renderer: Optional[PreviewRenderer] = None):
        self.renderer = renderer or PreviewRenderer()
        self._editors: Dict[str, TemplateEditor] = {}
        self._saving: Set[str] = set()
        logger.info("[STATE-MANAGER] Initialized")

    def open_editor(
        self,
        document_id: str,
        certificate_data: CertificateData,
        client: TemplateClient
    ) -> TemplateEditor:
        """Create a fresh editing session, replacing any existing one for the document."""
        if document_id in self._editors:
            logger.info(f"[STATE-MANAGER] Replacing editing session for {document_id}")

        editor = TemplateEditor(
            document_id=document_id,
            certificate_data=certificate_data,
            client=client,
            renderer=self.renderer,
            saving_documents=self._saving
        )
        self._editors[document_id] = editor
        return editor

    def get_editor(self, document_id: str) -> Optional[TemplateEditor]:
        return self._editors.get(document_id)

    def close_editor(self, document_id: str) -> bool:
        """Drop an editing session. Unsaved edits are discarded."""
        if self._editors.pop(document_id, None) is None:
            return False
        logger.info(f"[STATE-MANAGER] Closed editing session for {document_id}")
        return True

    def list_documents(self) -> List[str]:
        return list(self._editors)
