"""
Review workflow for submissions.

Approving a submission publishes a derived entry to the AI bands catalog;
rejecting it only records the decision. Neither branch checks whether the
submission was already reviewed, so approving twice publishes two entries.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ai_band_registry.core.exceptions import NotFoundError, StorageError, ValidationError
from ai_band_registry.core.platforms import classify_platforms
from ai_band_registry.models.dtos import CatalogEntry, ReviewAction, Submission, SubmissionStatus
from ai_band_registry.storage.json_store import CatalogStore, SubmissionStore

logger = logging.getLogger(__name__)

AI_GENERATED_TAG = "ai-generated"


def build_catalog_entry(submission: Submission, today: Optional[str] = None) -> CatalogEntry:
    """
    Derive the catalog entry published when a submission is approved.

    Args:
        submission: The approved submission
        today: ``YYYY-MM-DD`` date to record as ``dateAdded``, defaults to the current UTC date

    Returns:
        CatalogEntry: The entry to append to the catalog
    """
    if today is None:
        today = datetime.now(timezone.utc).date().isoformat()

    return CatalogEntry(
        name=submission.artist_name,
        date_added=today,
        date_updated=None,
        comments=submission.additional_info or None,
        tags=[AI_GENERATED_TAG],
        youtube=submission.youtube_url,
        urls=list(submission.verification_links),
        **classify_platforms(submission.other_platforms),
    )


def review_submission(
    submission_id: str,
    action: Union[ReviewAction, str],
    submissions: SubmissionStore,
    catalog: CatalogStore,
) -> Submission:
    """
    Apply an approve or reject decision to a stored submission.

    Args:
        submission_id: Id of the submission to review
        action: ``approve`` or ``reject``
        submissions: Store holding the submission
        catalog: Catalog that receives the entry on approval

    Returns:
        Submission: The updated submission

    Raises:
        ValidationError: If the action is not recognised
        NotFoundError: If no submission has the given id
        StorageError: If either file cannot be read or written
    """
    try:
        action = ReviewAction(action)
    except ValueError as e:
        raise ValidationError(f"Invalid action: {action}") from e

    with submissions.update() as records:
        index = next((i for i, record in enumerate(records) if record.get("id") == submission_id), None)
        if index is None:
            raise NotFoundError("Submission not found")

        try:
            submission = Submission.model_validate(records[index])
        except PydanticValidationError as e:
            raise StorageError(f"Malformed submission {submission_id} in {submissions.path}: {e}") from e

        if action is ReviewAction.APPROVE:
            entry = build_catalog_entry(submission)
            catalog_size = catalog.append(entry.to_record())
            submission.status = SubmissionStatus.APPROVED
            logger.info(
                f"Approved submission {submission_id} ({submission.artist_name}); "
                f"{catalog.path} now holds {catalog_size} entries"
            )
        else:
            submission.status = SubmissionStatus.REJECTED
            logger.info(f"Rejected submission {submission_id} ({submission.artist_name})")

        submission.reviewed = True
        # Keep any keys the model does not know about
        records[index] = {**records[index], **submission.to_record()}

    return submission
