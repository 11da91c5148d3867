"""
Pydantic schemas for API request/response validation.
"""
from typing import Optional
from pydantic import BaseModel


class MarkdownRequest(BaseModel):
    """Request body for Markdown conversions."""
    markdown: str


class PdfOptimizeRequest(BaseModel):
    """Request body for PDF optimization (base64 or base64 data URL)."""
    data: str


class ConversionResponse(BaseModel):
    """Response for Markdown conversions."""
    data: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None


class OptimizationResponse(BaseModel):
    """Response for PDF optimization."""
    data: Optional[str] = None
    size: Optional[int] = None
    original_size: int
    reduction_percent: Optional[int] = None
    method: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
