"""
Configuration management using Pydantic Settings.

Environment variables:
- MAX_MARKDOWN_CHARS: Markdown input ceiling (characters)
- MAX_PDF_BYTES: PDF input ceiling (decoded bytes)
- BROWSER_TIMEOUT_MS: Navigation/print timeout for the headless browser
- PDF_PRODUCER / PDF_CREATOR / PDF_TITLE: Metadata written to output PDFs
- LOG_LEVEL: Root logging level
"""
from pydantic import Field
from pydantic_settings import BaseSettings

from core.constants import MAX_MARKDOWN_CHARS, MAX_PDF_BYTES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Input ceilings
    max_markdown_chars: int = Field(default=MAX_MARKDOWN_CHARS, env="MAX_MARKDOWN_CHARS")
    max_pdf_bytes: int = Field(default=MAX_PDF_BYTES, env="MAX_PDF_BYTES")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", env="API_HOST")
    api_port: int = Field(default=8003, env="API_PORT")

    # Headless browser
    browser_timeout_ms: int = Field(default=30000, env="BROWSER_TIMEOUT_MS")
    browser_headless: bool = Field(default=True, env="BROWSER_HEADLESS")

    # Output PDF metadata
    pdf_producer: str = Field(default="mdconvert", env="PDF_PRODUCER")
    pdf_creator: str = Field(default="mdconvert", env="PDF_CREATOR")
    pdf_title: str = Field(default="Document converted from Markdown", env="PDF_TITLE")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def get_pdf_metadata(self) -> dict:
        """Get output PDF metadata as dictionary."""
        return {
            'producer': self.pdf_producer,
            'creator': self.pdf_creator,
            'title': self.pdf_title
        }

    def get_browser_config(self) -> dict:
        """Get headless browser configuration as dictionary."""
        return {
            'timeout_ms': self.browser_timeout_ms,
            'headless': self.browser_headless
        }


# Global settings instance
settings = Settings()
