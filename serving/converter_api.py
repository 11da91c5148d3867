"""
Converter API for Markdown and PDF conversions.

Provides endpoints for:
- Markdown -> PDF
- Markdown -> DOCX
- PDF size optimization (JSON base64 body or file upload)

Conversion failures are reported in the response body, never as HTTP errors.
"""
import base64
import logging

from fastapi import Depends, FastAPI, File, UploadFile

from api.dependencies import get_optimizer
from api.schemas import (
    ConversionResponse,
    MarkdownRequest,
    OptimizationResponse,
    PdfOptimizeRequest
)
from config.settings import settings
from services.pdf_optimizer import PdfOptimizer
from .logic import convert_markdown_to_docx, convert_markdown_to_pdf, optimize_pdf


# Create FastAPI app
converter_app = FastAPI(
    title="Markdown & PDF Converter API",
    description="Markdown to PDF/DOCX conversion and PDF size optimization",
    version="1.0.0"
)


@converter_app.on_event("startup")
async def startup_event():
    """Configure logging on startup."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    print("✓ Converter API initialized")


@converter_app.post("/convert/markdown-to-pdf", response_model=ConversionResponse)
def markdown_to_pdf(request: MarkdownRequest):
    """
    Convert Markdown to PDF.

    Args:
        request: Markdown source

    Returns:
        Base64 PDF or error message
    """
    return convert_markdown_to_pdf(request.markdown).to_dict()


@converter_app.post("/convert/markdown-to-docx", response_model=ConversionResponse)
def markdown_to_docx(request: MarkdownRequest):
    """
    Convert Markdown to DOCX.

    Args:
        request: Markdown source

    Returns:
        Base64 DOCX or error message
    """
    return convert_markdown_to_docx(request.markdown).to_dict()


@converter_app.post("/optimize-pdf", response_model=OptimizationResponse)
async def optimize_pdf_endpoint(
    request: PdfOptimizeRequest,
    optimizer: PdfOptimizer = Depends(get_optimizer)
):
    """
    Optimize a base64-encoded PDF.

    Args:
        request: Base64 PDF
        optimizer: Optimization pipeline

    Returns:
        Optimized PDF with sizes, or an error message
    """
    result = await optimize_pdf(request.data, optimizer=optimizer)
    return result.to_dict()


@converter_app.post("/optimize-pdf/upload", response_model=OptimizationResponse)
async def optimize_pdf_upload(
    file: UploadFile = File(...),
    optimizer: PdfOptimizer = Depends(get_optimizer)
):
    """
    Optimize an uploaded PDF file.

    Args:
        file: PDF file
        optimizer: Optimization pipeline

    Returns:
        Optimized PDF with sizes, or an error message
    """
    content = await file.read()
    result = await optimize_pdf(base64.b64encode(content).decode(), optimizer=optimizer)
    return result.to_dict()


@converter_app.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@converter_app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "Markdown & PDF Converter API",
        "version": "1.0.0",
        "endpoints": {
            "markdown_to_pdf": "POST /convert/markdown-to-pdf",
            "markdown_to_docx": "POST /convert/markdown-to-docx",
            "optimize_pdf": "POST /optimize-pdf",
            "optimize_pdf_upload": "POST /optimize-pdf/upload",
            "health": "GET /health"
        }
    }


# Export app for uvicorn
app = converter_app
