"""
Certificate Designer Server
===========================

FastAPI server for the certificate template layout editor.

Features:
- Drag/resize layout canvas for certificate pages (A4, 595x842)
- Property inspector bound to the selected element
- Data-bound elements kept in sync with the certificate record
- Template persistence through the certification backend
- Read-only HTML preview
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import services
from .services.template_client import TemplateClient, CERT_API_BASE_URL

# Import editor registry
from .canvas.state_manager import StateManager
from .canvas.bindings import BOUND_KEYS
from .models.layout_models import PAGE_WIDTH, PAGE_HEIGHT, STYLE_DEFAULTS

# Import API routers
from .api import editor_routes, element_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("[CERT-DESIGNER] Starting up...")

    state_manager = StateManager()
    template_client = TemplateClient()

    # Inject into route modules
    editor_routes.state_manager = state_manager
    editor_routes.template_client = template_client

    logger.info("[CERT-DESIGNER] Services initialized")

    yield

    # Cleanup
    logger.info("[CERT-DESIGNER] Shutting down...")
    await template_client.close()
    editor_routes.state_manager = None
    editor_routes.template_client = None


# Create FastAPI app
app = FastAPI(
    title="Certificate Designer",
    description="Certificate template layout editor with data-bound fields",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(editor_routes.router)
app.include_router(element_routes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "certificate-designer",
        "cert_api": CERT_API_BASE_URL
    }


@app.get("/api/info")
async def api_info():
    """Get page geometry, bound element ids and style defaults."""
    return {
        "service": "Certificate Designer",
        "version": "1.0.0",
        "page": {"width": PAGE_WIDTH, "height": PAGE_HEIGHT},
        "bound_element_ids": sorted(BOUND_KEYS),
        "style_defaults": {kind.value: defaults for kind, defaults in STYLE_DEFAULTS.items()},
        "endpoints": {
            "editor": "/api/editor/{document_id}/open",
            "elements": "/api/element/{document_id}/{element_id}",
            "inspector": "/api/element/{document_id}/inspector",
            "preview": "/api/editor/{document_id}/preview"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "certificate_designer.server:app",
        host="0.0.0.0",
        port=int(os.getenv("CERT_DESIGNER_PORT", "8080")),
        reload=True
    )
