"""
Template Client for Certificate Designer
=========================================

HTTP client for the certification backend's per-certificate
template_data endpoint.

    GET  /certifications/{id}/template_data/  -> {"template_data": {...}}
    POST /certifications/{id}/template_data/  <- {"template_data": {...}}
"""

import os
import logging
from typing import Any, Dict, List, Optional
import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

CERT_API_BASE_URL = os.getenv("CERT_API_URL", "http://localhost:8000/api/v1")
CERT_API_TOKEN = os.getenv("CERT_API_TOKEN")
CERT_API_TIMEOUT = float(os.getenv("CERT_API_TIMEOUT", "30"))


class TemplateFetchResponse(BaseModel):
    """Result of fetching a certificate's template data."""
    success: bool
    found: bool = False
    status_code: Optional[int] = None
    template_data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class TemplateSaveResponse(BaseModel):
    """Result of submitting a certificate's template data."""
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


def _error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response."""
    message = f"HTTP {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return f"{message}: {text[:200]}" if text else message

    if isinstance(data, dict):
        detail = data.get("error") or data.get("message") or data.get("detail")
        if detail:
            return f"{message}: {detail}"
    return message


class TemplateClient:
    """
    Client for certificate template persistence.

    Usage:
        client = TemplateClient()
        fetched = await client.fetch_template("42")
        if fetched.found:
            elements = fetched.template_data["elements"]
        saved = await client.save_template("42", elements)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = CERT_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or CERT_API_BASE_URL).rstrip("/")
        self.token = token if token is not None else CERT_API_TOKEN
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        logger.info(f"[TEMPLATE-CLIENT] Initialized with timeout={timeout}, url={self.base_url}")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            if self.token:
                headers["Authorization"] = f"Token {self.token}"
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def template_url(self, document_id: str) -> str:
        return f"{self.base_url}/certifications/{document_id}/template_data/"

    async def fetch_template(self, document_id: str) -> TemplateFetchResponse:
        """
        Fetch the saved template data for a certificate.

        A 404 is the normal "nothing saved yet" answer and comes back as
        success with found=False.
        """
        url = self.template_url(document_id)
        logger.info(f"[TEMPLATE-CLIENT] Loading template for certification {document_id}")

        try:
            client = await self._get_client()
            response = await client.get(url)

            if response.status_code == 404:
                logger.info(f"[TEMPLATE-CLIENT] No template stored for certification {document_id}")
                return TemplateFetchResponse(success=True, found=False, status_code=404)

            if response.status_code != 200:
                error_msg = _error_message(response)
                logger.error(f"[TEMPLATE-CLIENT] Error loading template: {error_msg}")
                return TemplateFetchResponse(
                    success=False,
                    status_code=response.status_code,
                    error=error_msg
                )

            data = response.json()
            template_data = data.get("template_data") if isinstance(data, dict) else None
            return TemplateFetchResponse(
                success=True,
                found=isinstance(template_data, dict),
                status_code=response.status_code,
                template_data=template_data if isinstance(template_data, dict) else None
            )

        except httpx.TimeoutException:
            logger.error("[TEMPLATE-CLIENT] Timeout loading template")
            return TemplateFetchResponse(success=False, error="Template service timeout")
        except httpx.RequestError as e:
            logger.error(f"[TEMPLATE-CLIENT] Network error: {e}")
            return TemplateFetchResponse(success=False, error=f"Network error: {str(e)}")
        except ValueError as e:
            logger.error(f"[TEMPLATE-CLIENT] Invalid JSON in template response: {e}")
            return TemplateFetchResponse(success=False, error=f"Invalid response: {str(e)}")

    async def save_template(
        self,
        document_id: str,
        elements: List[Dict[str, Any]]
    ) -> TemplateSaveResponse:
        """Submit serialized elements, marking the record as a saved template."""
        url = self.template_url(document_id)
        payload = {
            "template_data": {
                "elements": elements,
                "is_saved_template": True
            }
        }
        logger.info(f"[TEMPLATE-CLIENT] Saving {len(elements)} elements for certification {document_id}")

        try:
            client = await self._get_client()
            response = await client.post(url, json=payload)

            if response.status_code not in (200, 201, 204):
                error_msg = _error_message(response)
                logger.error(f"[TEMPLATE-CLIENT] Error saving template: {error_msg}")
                return TemplateSaveResponse(
                    success=False,
                    status_code=response.status_code,
                    error=error_msg
                )

            logger.info(f"[TEMPLATE-CLIENT] Saved template for certification {document_id}")
            return TemplateSaveResponse(success=True, status_code=response.status_code)

        except httpx.TimeoutException:
            logger.error("[TEMPLATE-CLIENT] Timeout saving template")
            return TemplateSaveResponse(success=False, error="Template service timeout - please try again")
        except httpx.RequestError as e:
            logger.error(f"[TEMPLATE-CLIENT] Network error: {e}")
            return TemplateSaveResponse(success=False, error=f"Network error: {str(e)}")
