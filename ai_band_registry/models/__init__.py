"""
Models package for the AI Band Registry service.

This package contains the Pydantic DTOs used on the wire and on disk.
"""

from .dtos import (
    CamelModel,
    CatalogEntry,
    ErrorResponse,
    HealthResponse,
    PendingCountResponse,
    ReviewAction,
    ReviewRequest,
    ReviewResponse,
    Submission,
    SubmissionStatus,
    SubmitAIBandRequest,
    SubmitAIBandResponse,
)

# Define what is exported with 'from ai_band_registry.models import *'
__all__ = [
    "CamelModel",
    "CatalogEntry",
    "ErrorResponse",
    "HealthResponse",
    "PendingCountResponse",
    "ReviewAction",
    "ReviewRequest",
    "ReviewResponse",
    "Submission",
    "SubmissionStatus",
    "SubmitAIBandRequest",
    "SubmitAIBandResponse",
]
