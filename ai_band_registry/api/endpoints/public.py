"""
Public API endpoints.

Serves the AI bands catalog and the plugin config, and accepts new
submissions from the public form.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ai_band_registry.api.dependencies import get_catalog_store, get_submission_store, parse_submission_body
from ai_band_registry.config.settings import Settings, get_settings
from ai_band_registry.core import intake
from ai_band_registry.core.exceptions import StorageError
from ai_band_registry.models.dtos import (
    ErrorResponse,
    PendingCountResponse,
    SubmitAIBandRequest,
    SubmitAIBandResponse,
)
from ai_band_registry.storage.json_store import CatalogStore, SubmissionStore, read_json_document

router = APIRouter()
logger = logging.getLogger(__name__)

SUBMISSION_SCHEMA = SubmitAIBandRequest.model_json_schema(by_alias=True)


@router.get("/ai-bands.json", responses={500: {"model": ErrorResponse}})
def get_ai_bands(catalog: CatalogStore = Depends(get_catalog_store)) -> List[Dict[str, Any]]:
    """Return the AI bands catalog exactly as stored."""
    try:
        return catalog.load_all()
    except StorageError as e:
        logger.error(f"Error loading AI bands database: {e}")
        raise StorageError("Failed to load AI bands database") from e


@router.get("/YoutubeConfig.json", responses={500: {"model": ErrorResponse}})
def get_youtube_config(settings: Settings = Depends(get_settings)) -> Any:
    """Return the browser plugin config, used by the plugin for version checks."""
    try:
        return read_json_document(settings.youtube_config_path)
    except StorageError as e:
        logger.error(f"Error loading plugin config: {e}")
        raise StorageError("Failed to load plugin config") from e


@router.get(
    "/api/check-pending",
    response_model=PendingCountResponse,
    response_model_by_alias=True,
    responses={500: {"model": ErrorResponse}},
)
def check_pending(submissions: SubmissionStore = Depends(get_submission_store)) -> PendingCountResponse:
    """Count submissions still awaiting review."""
    try:
        return PendingCountResponse(pending_count=submissions.count_pending())
    except StorageError as e:
        logger.error(f"Error checking pending submissions: {e}")
        raise StorageError("Failed to check pending submissions") from e


@router.post(
    "/api/submit-ai-band",
    response_model=SubmitAIBandResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": SUBMISSION_SCHEMA},
                "application/x-www-form-urlencoded": {"schema": SUBMISSION_SCHEMA},
            },
        }
    },
)
def submit_ai_band(
    request: SubmitAIBandRequest = Depends(parse_submission_body),
    submissions: SubmissionStore = Depends(get_submission_store),
) -> SubmitAIBandResponse:
    """
    Accept a new AI band submission.

    Args:
        request: Raw form fields from a JSON body or an HTML form post;
            link lists are newline-separated
        submissions: Submission store

    Returns:
        SubmitAIBandResponse: Confirmation including the new submission id

    Raises:
        ValidationError: If required fields are missing or the YouTube URL is invalid
        StorageError: If the submission could not be saved
    """
    try:
        submission = intake.submit(request, submissions)
    except StorageError as e:
        logger.error(f"Error processing submission: {e}", exc_info=True)
        raise StorageError("Internal server error") from e

    return SubmitAIBandResponse(
        message="Submission received successfully",
        submission_id=submission.id,
    )
