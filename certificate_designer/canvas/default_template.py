"""
Default Certificate Template
============================

Starter element set used when a certification has no saved layout.
"""

from typing import List

from ..models.certificate_models import CertificateData
from ..models.layout_models import ElementKind, Geometry, LayoutElement
from .bindings import derive_content

DEFAULT_CERTIFICATION_BODY = "AceQu International Ltd – UK"
DEFAULT_HEADER_IMAGE = "/img/5.png"
FOOTER_COMPANY = "AceQu International Ltd, 168 City Road, Cardiff, Wales, CF24 3JE, United Kingdom"
FOOTER_DISCLAIMER = (
    "This certificate is the property of AceQu International Limited and should be "
    "returned back upon request.\n"
    "The certificate cannot be transferred and is valid for the client, address and "
    "scope stated above."
)

# (id, kind, static content, x, y, width, height, style)
# Static content of None means the element is filled from the certificate record.
DEFAULT_LAYOUT = [
    ("title", ElementKind.TEXT, "Certificate of Registration", 20, 50, 492, 40,
     {"fontSize": "28px", "fontWeight": "bold", "textAlign": "left"}),
    ("issued-to", ElementKind.TEXT, "This certificate is issued to", 20, 100, 492, 20,
     {"fontSize": "14px", "textAlign": "left"}),
    ("client-name", ElementKind.TEXT, None, 20, 130, 492, 30,
     {"fontSize": "20px", "fontWeight": "bold", "textAlign": "left", "paddingBottom": "10px"}),
    ("certification-body", ElementKind.TEXT, "", 20, 180, 492, 60,
     {"fontSize": "14px", "textAlign": "left", "lineHeight": "1.5"}),
    ("standard", ElementKind.TEXT, None, 20, 250, 492, 40,
     {"fontSize": "14px", "fontWeight": "bold", "textAlign": "left"}),
    ("scope-label", ElementKind.TEXT, "Scope of Certification:", 20, 300, 492, 20,
     {"fontSize": "12px", "fontWeight": "bold", "textAlign": "left"}),
    ("scope-content", ElementKind.TEXT, None, 20, 325, 492, 60,
     {"fontSize": "12px", "lineHeight": "1.4", "textAlign": "left"}),
    ("scope-work-label", ElementKind.TEXT, "Scope of work:", 20, 400, 492, 20,
     {"fontSize": "12px", "fontWeight": "bold", "textAlign": "left"}),
    ("scope-work-content", ElementKind.TEXT, None, 20, 425, 492, 60,
     {"fontSize": "12px", "lineHeight": "1.4", "textAlign": "left"}),
    ("cert-number", ElementKind.TEXT, None, 20, 500, 300, 20,
     {"fontSize": "11px", "fontWeight": "bold"}),
    ("orig-reg-date", ElementKind.TEXT, None, 20, 520, 300, 20,
     {"fontSize": "11px"}),
    ("issue-date", ElementKind.TEXT, None, 20, 540, 300, 20,
     {"fontSize": "11px"}),
    ("expiry-date", ElementKind.TEXT, None, 20, 560, 300, 20,
     {"fontSize": "11px"}),
    ("header-image", ElementKind.IMAGE, DEFAULT_HEADER_IMAGE, 20, 600, 492, 60,
     {"objectFit": "contain"}),
    ("footer-company", ElementKind.TEXT, FOOTER_COMPANY, 50, 760, 492, 20,
     {"fontSize": "10px", "textAlign": "center"}),
    ("footer-disclaimer", ElementKind.TEXT, FOOTER_DISCLAIMER, 50, 785, 492, 40,
     {"fontSize": "9px", "textAlign": "center", "lineHeight": "1.3"}),
]


def certification_body_text(data: CertificateData) -> str:
    """Boilerplate paragraph naming the issuing body."""
    body = data.certification_body or DEFAULT_CERTIFICATION_BODY
    return (
        f"{body} Certifies that the Management System of the above organisation has been "
        "audited and found to be in accordance with the requirements of the management "
        "system standards detailed below:"
    )


def build_default_elements(data: CertificateData) -> List[LayoutElement]:
    """Build the starter element set with bound content taken from data."""
    elements = []
    for element_id, kind, content, x, y, width, height, style in DEFAULT_LAYOUT:
        if content is None:
            content = derive_content(element_id, data)
        elif element_id == "certification-body":
            content = certification_body_text(data)

        elements.append(LayoutElement(
            id=element_id,
            kind=kind,
            content=content,
            geometry=Geometry(x=x, y=y, width=width, height=height),
            style=dict(style)
        ))
    return elements
