"""Pydantic schemas for API request/response models."""
from .share import ShareContent
from .health import HealthResponse

__all__ = ["ShareContent", "HealthResponse"]
