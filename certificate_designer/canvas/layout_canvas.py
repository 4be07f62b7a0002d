"""
Layout Canvas
=============

Element collection for one certificate page and the mutations the
editor applies to it (drag, resize, content and style edits, data
binding re-application).
"""

import logging
import re
from typing import Any, Dict, FrozenSet, List, Optional, Set

from ..models.certificate_models import CertificateData
from ..models.layout_models import DragState, EditorSession, LayoutElement
from .bindings import derive_content, is_bound

logger = logging.getLogger(__name__)

RESIZABLE_FIELDS = ("width", "height")
LEADING_INT = re.compile(r"\s*[+-]?\d+")


def coerce_dimension(value: Any) -> int:
    """
    Parse a size field as a non-negative integer.

    Leading digits are used ("120px" -> 120); anything without them,
    including None, parses as 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        try:
            return max(0, int(value))
        except (ValueError, OverflowError):
            return 0

    match = LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(0, int(match.group(0)))


class LayoutCanvas:
    """Ordered element collection with lookup by id."""

    def __init__(self, elements: Optional[List[LayoutElement]] = None):
        self._elements: List[LayoutElement] = []
        self._index: Dict[str, LayoutElement] = {}
        self._manually_edited: Set[str] = set()
        if elements:
            self.load_elements(elements)

    @property
    def elements(self) -> List[LayoutElement]:
        return list(self._elements)

    @property
    def manually_edited(self) -> FrozenSet[str]:
        """Ids whose content the user has overridden."""
        return frozenset(self._manually_edited)

    def __len__(self) -> int:
        return len(self._elements)

    def load_elements(self, elements: List[LayoutElement]) -> None:
        """Replace the whole collection."""
        index: Dict[str, LayoutElement] = {}
        for element in elements:
            if element.id in index:
                raise ValueError(f"Duplicate element id: {element.id}")
            index[element.id] = element

        self._elements = list(elements)
        self._index = index
        self._manually_edited = set()
        logger.debug(f"[CANVAS] Loaded {len(self._elements)} elements")

    def get_element(self, element_id: str) -> Optional[LayoutElement]:
        return self._index.get(element_id)

    # Selection and drag

    def select_element(self, session: EditorSession, element_id: Optional[str]) -> bool:
        """Select an element; None clears the selection."""
        if element_id is None:
            session.selected_id = None
            return True
        if element_id not in self._index:
            return False
        session.selected_id = element_id
        return True

    def begin_drag(
        self,
        session: EditorSession,
        element_id: str,
        pointer_x: float,
        pointer_y: float
    ) -> bool:
        """Start dragging an element, remembering the pointer offset from its origin."""
        element = self._index.get(element_id)
        if element is None:
            return False

        session.drag = DragState(
            is_dragging=True,
            offset_x=pointer_x - element.geometry.x,
            offset_y=pointer_y - element.geometry.y
        )
        session.selected_id = element_id
        return True

    def update_drag_position(
        self,
        session: EditorSession,
        pointer_x: float,
        pointer_y: float
    ) -> bool:
        """Move the dragged element to follow the pointer, never past the page origin."""
        if not session.drag.is_dragging or session.selected_id is None:
            return False
        element = self._index.get(session.selected_id)
        if element is None:
            return False

        element.geometry.x = max(0, pointer_x - session.drag.offset_x)
        element.geometry.y = max(0, pointer_y - session.drag.offset_y)
        return True

    def end_drag(self, session: EditorSession) -> None:
        session.drag = DragState()

    # Field edits

    def set_content(self, element_id: str, text: str) -> bool:
        """Overwrite content and exempt the element from data binding."""
        element = self._index.get(element_id)
        if element is None:
            return False

        element.content = text
        if element_id not in self._manually_edited:
            self._manually_edited.add(element_id)
            logger.debug(f"[CANVAS] {element_id} marked as manually edited")
        return True

    def set_style(self, element_id: str, key: str, value: Any) -> bool:
        element = self._index.get(element_id)
        if element is None:
            return False

        element.style = {**element.style, key: value}
        return True

    def set_geometry(self, element_id: str, field: str, value: Any) -> bool:
        """Resize an element; only width and height are editable here."""
        if field not in RESIZABLE_FIELDS:
            return False
        element = self._index.get(element_id)
        if element is None:
            return False

        setattr(element.geometry, field, coerce_dimension(value))
        return True

    # Data binding

    def reapply_bindings(self, data: CertificateData) -> List[str]:
        """
        Re-derive content of bound elements from the certificate record.

        Manually edited elements are left alone.

        Returns:
            Ids of the elements whose content changed
        """
        changed = []
        for element in self._elements:
            if not is_bound(element.id) or element.id in self._manually_edited:
                continue
            content = derive_content(element.id, data)
            if content != element.content:
                element.content = content
                changed.append(element.id)

        if changed:
            logger.info(f"[CANVAS] Re-applied bindings to {len(changed)} elements: {changed}")
        return changed

    def serialize(self) -> List[Dict[str, Any]]:
        """Element collection in order, in the persisted wire shape."""
        return [element.to_wire() for element in self._elements]
