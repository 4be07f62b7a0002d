"""
Tests for the default certificate template.
"""

from certificate_designer.canvas.default_template import (
    DEFAULT_CERTIFICATION_BODY, build_default_elements
)
from certificate_designer.models.certificate_models import CertificateData
from certificate_designer.models.layout_models import ElementKind


class TestDefaultTemplate:
    """Tests for the starter element set."""

    def test_element_order(self, certificate_data):
        ids = [e.id for e in build_default_elements(certificate_data)]
        assert ids == [
            "title", "issued-to", "client-name", "certification-body", "standard",
            "scope-label", "scope-content", "scope-work-label", "scope-work-content",
            "cert-number", "orig-reg-date", "issue-date", "expiry-date",
            "header-image", "footer-company", "footer-disclaimer",
        ]

    def test_bound_content(self, certificate_data):
        elements = {e.id: e for e in build_default_elements(certificate_data)}
        assert elements["client-name"].content == "ABC Corp"
        assert elements["standard"].content == "Standard: ISO 9001:2015"
        assert elements["issue-date"].content == "Date of certificate: 15/01/2025"
        assert elements["cert-number"].content == "Certification Number: 1234"

    def test_header_image(self, certificate_data):
        elements = {e.id: e for e in build_default_elements(certificate_data)}
        image = elements["header-image"]
        assert image.kind == ElementKind.IMAGE
        assert image.content == "/img/5.png"

    def test_certification_body(self, certificate_data):
        elements = {e.id: e for e in build_default_elements(certificate_data)}
        assert elements["certification-body"].content.startswith(DEFAULT_CERTIFICATION_BODY)

        custom = CertificateData(certificationBody="Example Certification Ltd")
        elements = {e.id: e for e in build_default_elements(custom)}
        assert elements["certification-body"].content.startswith("Example Certification Ltd Certifies")

    def test_disclaimer_keeps_newline(self, certificate_data):
        elements = {e.id: e for e in build_default_elements(certificate_data)}
        assert "\n" in elements["footer-disclaimer"].content

    def test_elements_are_independent(self, certificate_data):
        """Each build returns fresh style maps."""
        first = build_default_elements(certificate_data)
        second = build_default_elements(certificate_data)
        first[0].style["fontSize"] = "99px"
        assert second[0].style["fontSize"] == "28px"
