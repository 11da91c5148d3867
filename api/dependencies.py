"""
API Dependencies - Dependency injection for FastAPI.

Provides per-request renderer and optimizer instances.
"""
from fastapi import Depends

from services.browser_renderer import BrowserPdfRenderer
from services.pdf_optimizer import PdfOptimizer
from serving.logic import build_optimizer, build_renderer


def get_renderer() -> BrowserPdfRenderer:
    """
    Dependency for the headless-browser renderer.

    Returns:
        BrowserPdfRenderer configured from settings
    """
    return build_renderer()


def get_optimizer(renderer: BrowserPdfRenderer = Depends(get_renderer)) -> PdfOptimizer:
    """
    Dependency for the PDF optimizer.

    Args:
        renderer: Renderer for the re-render stage

    Returns:
        PdfOptimizer instance
    """
    return build_optimizer(renderer)
