"""
Certificate Models for Certificate Designer
============================================

External certificate record that feeds the data-bound template elements.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CertificateData(BaseModel):
    """
    Certificate record supplied by the surrounding page.

    Accepts the camelCase names used on the wire as well as the
    snake_case attribute names.
    """
    client_name: str = Field(default="", alias="clientName")
    standard: str = ""
    scope: str = ""
    certificate_number: str = Field(default="", alias="certificateNumber")
    cert_num_int: Optional[str] = Field(default=None, alias="certNumInt")
    original_registration_date: str = Field(default="", alias="originalRegistrationDate")
    issue_date: str = Field(default="", alias="issueDate")
    expiry_date: str = Field(default="", alias="expiryDate")
    certification_body: Optional[str] = Field(default=None, alias="certificationBody")
    lead_auditor: Optional[str] = Field(default=None, alias="leadAuditor")
    location: Optional[str] = None
    registration_number: Optional[str] = Field(default=None, alias="registrationNumber")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def display_certificate_number(self) -> str:
        """Number printed on the certificate, '0000' when none is known."""
        return self.cert_num_int or self.certificate_number or "0000"
