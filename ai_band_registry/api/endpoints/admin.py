"""
Admin API endpoints.

Every route on this router requires the admin bearer token; the check runs
before any store is read.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ai_band_registry.api.dependencies import get_catalog_store, get_submission_store
from ai_band_registry.api.security import require_admin
from ai_band_registry.config.settings import Settings, get_settings
from ai_band_registry.core import review
from ai_band_registry.core.exceptions import StorageError, ValidationError
from ai_band_registry.models.dtos import ErrorResponse, ReviewRequest, ReviewResponse
from ai_band_registry.storage.json_store import CatalogStore, SubmissionStore

router = APIRouter(
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}},
)
logger = logging.getLogger(__name__)


@router.get("/submissions", responses={500: {"model": ErrorResponse}})
def list_submissions(submissions: SubmissionStore = Depends(get_submission_store)) -> List[Dict[str, Any]]:
    """Return every submission, reviewed or not, in file order."""
    try:
        return submissions.load_all()
    except StorageError as e:
        logger.error(f"Error reading submissions: {e}")
        raise StorageError("Error reading submissions") from e


@router.post(
    "/submissions/{submission_id}",
    response_model=ReviewResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def review_submission(
    submission_id: str,
    request: ReviewRequest,
    submissions: SubmissionStore = Depends(get_submission_store),
    catalog: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
) -> ReviewResponse:
    """
    Approve or reject a submission.

    Approval appends an entry to the AI bands catalog, or to the file named by
    ``aiBandsPath`` (relative to the data directory) when given.

    Raises:
        ValidationError: If ``aiBandsPath`` resolves to the submissions file
        NotFoundError: If the submission id is unknown
        StorageError: If a store could not be read or written
    """
    if request.ai_bands_path:
        catalog = CatalogStore(settings.resolve_data_path(request.ai_bands_path))
        if catalog.path.resolve() == submissions.path.resolve():
            # The submissions write-back would overwrite the appended entry
            raise ValidationError("aiBandsPath must not point at the submissions file")

    try:
        review.review_submission(submission_id, request.action, submissions, catalog)
    except StorageError as e:
        logger.error(f"Error processing admin action: {e}", exc_info=True)
        raise StorageError("Internal server error") from e

    return ReviewResponse(message=f"Submission {request.action.value}d")
