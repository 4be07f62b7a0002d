"""
Tests for data-binding rules and date formatting.
"""

import inspect
import warnings

import pytest

from certificate_designer.canvas.bindings import (
    BOUND_KEYS, derive_content, format_date, is_bound
)
from certificate_designer.models import certificate_models
from certificate_designer.models.certificate_models import CertificateData


class TestFormatDate:
    """Tests for DD/MM/YYYY date formatting."""

    @pytest.mark.parametrize("value, expected", [
        ("2025-01-15", "15/01/2025"),
        ("2024-02-29", "29/02/2024"),
        ("2025-01-15T09:30:00", "15/01/2025"),
        ("2025-01-15T23:30:00Z", "15/01/2025"),
        ("15/01/2025", "15/01/2025"),
        ("2025/01/15", "15/01/2025"),
        ("January 15, 2025", "15/01/2025"),
    ])
    def test_parseable_dates(self, value, expected):
        """Recognised date strings are rendered as DD/MM/YYYY."""
        assert format_date(value) == expected

    @pytest.mark.parametrize("value", ["not a date", "2025-02-30", "TBD", "31/31/2025"])
    def test_unparseable_dates_pass_through(self, value):
        """Invalid dates come back unchanged instead of failing."""
        assert format_date(value) == value

    def test_empty_and_missing(self):
        """Empty input renders as an empty string."""
        assert format_date("") == ""
        assert format_date(None) == ""


class TestBindingRules:
    """Tests for per-key content derivation."""

    def test_bound_keys(self):
        """The fixed set of bound element ids."""
        assert BOUND_KEYS == {
            "client-name", "standard", "scope-content", "scope-work-content",
            "cert-number", "orig-reg-date", "issue-date", "expiry-date",
        }
        assert is_bound("client-name")
        assert not is_bound("title")

    def test_derived_content(self, certificate_data):
        """Each bound key renders its prefix and value."""
        assert derive_content("client-name", certificate_data) == "ABC Corp"
        assert derive_content("standard", certificate_data) == "Standard: ISO 9001:2015"
        assert derive_content("scope-content", certificate_data) == "Widget manufacturing"
        assert derive_content("scope-work-content", certificate_data) == "Widget manufacturing"
        assert derive_content("cert-number", certificate_data) == "Certification Number: 1234"
        assert derive_content("orig-reg-date", certificate_data) == "Date of original registration: 15/01/2024"
        assert derive_content("issue-date", certificate_data) == "Date of certificate: 15/01/2025"
        assert derive_content("expiry-date", certificate_data) == "Date of certificate expiry: 15/01/2028"

    def test_unbound_key(self, certificate_data):
        """Unbound ids derive nothing."""
        assert derive_content("title", certificate_data) is None

    def test_certificate_number_fallback(self):
        """Missing certificate number renders as 0000."""
        data = CertificateData(clientName="ABC Corp")
        assert derive_content("cert-number", data) == "Certification Number: 0000"

    def test_certificate_number_prefers_internal_number(self):
        """certNumInt wins over certificateNumber when both are present."""
        data = CertificateData(certificateNumber="ISO-1234", certNumInt="77")
        assert derive_content("cert-number", data) == "Certification Number: 77"

    def test_unparseable_date_in_binding(self):
        """A malformed date is placed after the prefix unchanged."""
        data = CertificateData(issueDate="pending")
        assert derive_content("issue-date", data) == "Date of certificate: pending"

    def test_snake_case_names_accepted(self):
        """The record can be built with attribute names as well as wire names."""
        data = CertificateData(client_name="XYZ Ltd", issue_date="2025-03-01")
        assert derive_content("client-name", data) == "XYZ Ltd"
        assert derive_content("issue-date", data) == "Date of certificate: 01/03/2025"


class TestCertificateData:
    """Tests for the certificate record model definition."""

    def test_model_defines_without_deprecation_warnings(self):
        """The model config uses ConfigDict, not the deprecated class-based Config."""
        source = inspect.getsource(certificate_models)
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            exec(compile(source, certificate_models.__file__, "exec"), {"__name__": "certificate_models_copy"})

        assert CertificateData.model_config["populate_by_name"] is True

    def test_wire_and_attribute_names(self):
        by_alias = CertificateData(clientName="ABC Corp", certNumInt="77")
        by_name = CertificateData(client_name="ABC Corp", cert_num_int="77")
        assert by_alias == by_name
        assert by_name.display_certificate_number == "77"
