"""
Pydantic Data Transfer Objects (DTOs) for the AI Band Registry service.

These models are used for API request/response validation and for the records
persisted in the submissions and AI bands JSON files. Attributes are
snake_case in Python and camelCase on the wire.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to and from camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Return the JSON-ready dict stored on disk."""
        return self.model_dump(mode="json", by_alias=True)


class SubmissionStatus(str, Enum):
    """Lifecycle of a submission. Transitions out of PENDING are one-way."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Submission(CamelModel):
    """
    A crowd-sourced claim that an artist is AI-generated.

    Mirrors one record of the submissions file.
    """
    id: str
    timestamp: str
    artist_name: str
    youtube_url: str
    verification_links: List[str]
    other_platforms: List[str] = Field(default_factory=list)
    additional_info: str = ""
    status: SubmissionStatus = SubmissionStatus.PENDING
    reviewed: bool = False


class CatalogEntry(CamelModel):
    """
    An approved artist as published in the AI bands catalog.

    Platform fields are optional and omitted from the stored record when unset,
    whereas ``dateUpdated`` and ``comments`` are always written (possibly null).
    """
    name: str
    date_added: str
    date_updated: Optional[str] = None
    comments: Optional[str] = None
    tags: List[str]
    youtube: str
    urls: List[str]
    spotify: Optional[str] = None
    apple: Optional[str] = None
    tiktok: Optional[str] = None
    instagram: Optional[str] = None
    amazon: Optional[str] = None

    PLATFORM_FIELDS: ClassVar[Tuple[str, ...]] = ("spotify", "apple", "tiktok", "instagram", "amazon")

    def to_record(self) -> Dict[str, Any]:
        record = super().to_record()
        for platform in self.PLATFORM_FIELDS:
            if record.get(platform) is None:
                record.pop(platform, None)
        return record


class SubmitAIBandRequest(CamelModel):
    """
    Raw form input for a new submission.

    Every field is optional at this layer so that missing values surface as the
    intake's own validation message rather than a framework error.
    """
    artist_name: Optional[str] = Field(None, description="Name of the artist or band.")
    youtube_url: Optional[str] = Field(None, description="YouTube channel or video URL.")
    verification_links: Optional[str] = Field(None, description="Newline-separated evidence links.")
    other_platforms: Optional[str] = Field(None, description="Newline-separated links to other platforms.")
    additional_info: Optional[str] = Field(None, description="Free-form notes from the submitter.")


class SubmitAIBandResponse(CamelModel):
    success: bool = True
    message: str
    submission_id: str


class ReviewAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


class ReviewRequest(CamelModel):
    """Admin decision on a single submission."""
    action: ReviewAction
    ai_bands_path: Optional[str] = Field(
        None,
        description="Alternate catalog file for approvals, relative to the data directory.",
    )


class ReviewResponse(CamelModel):
    success: bool = True
    message: str


class PendingCountResponse(CamelModel):
    pending_count: int


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str
    version: str
    timestamp: str
