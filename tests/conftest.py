"""
Certificate Designer - Test Configuration and Fixtures
"""
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from certificate_designer.canvas.default_template import build_default_elements
from certificate_designer.canvas.layout_canvas import LayoutCanvas
from certificate_designer.models.certificate_models import CertificateData
from certificate_designer.models.layout_models import EditorSession
from certificate_designer.services.template_client import TemplateClient

BASE_URL = "http://backend.test/api/v1"


class FakeBackend:
    """In-memory stand-in for the certification backend's template_data endpoint."""

    def __init__(self):
        self.templates: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.fail_status: Optional[int] = None

    @property
    def posts(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"detail": "backend unavailable"})

        document_id = request.url.path.rstrip("/").split("/")[-2]
        if request.method == "GET":
            if document_id not in self.templates:
                return httpx.Response(404, json={"detail": "Not found."})
            return httpx.Response(200, json={"template_data": self.templates[document_id]})

        body = json.loads(request.content)
        self.templates[document_id] = body["template_data"]
        return httpx.Response(200, json={"success": True})


def make_client(handler: Callable, token: Optional[str] = None) -> TemplateClient:
    """TemplateClient wired to an httpx mock transport."""
    return TemplateClient(base_url=BASE_URL, token=token, transport=httpx.MockTransport(handler))


@pytest.fixture
def certificate_data() -> CertificateData:
    return CertificateData(
        clientName="ABC Corp",
        standard="ISO 9001:2015",
        scope="Widget manufacturing",
        certificateNumber="1234",
        originalRegistrationDate="2024-01-15",
        issueDate="2025-01-15",
        expiryDate="2028-01-15",
    )


@pytest.fixture
def canvas(certificate_data) -> LayoutCanvas:
    return LayoutCanvas(build_default_elements(certificate_data))


@pytest.fixture
def session() -> EditorSession:
    return EditorSession()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def template_client(backend) -> TemplateClient:
    return make_client(backend.handler)


@pytest.fixture
def saved_elements() -> List[Dict[str, Any]]:
    return [
        {
            "id": "title",
            "kind": "text",
            "content": "Custom Title",
            "geometry": {"x": 40.0, "y": 60.0, "width": 400.0, "height": 40.0},
            "style": {"fontSize": "30px", "fontWeight": "bold", "color": "#1a1a1a"},
        },
        {
            "id": "client-name",
            "kind": "text",
            "content": "Old Client Name",
            "geometry": {"x": 20.0, "y": 130.0, "width": 492.0, "height": 30.0},
            "style": {"fontSize": "20px"},
        },
        {
            "id": "header-image",
            "kind": "image",
            "content": "/img/logo.png",
            "geometry": {"x": 20.0, "y": 600.0, "width": 492.0, "height": 60.0},
            "style": {"objectFit": "cover"},
        },
    ]
