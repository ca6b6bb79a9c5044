"""
Submission intake.

Validates raw form input, normalises it into a Submission and appends it to
the submissions store.
"""

import logging
import re
import time
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ai_band_registry.core.exceptions import ValidationError
from ai_band_registry.models.dtos import Submission, SubmissionStatus, SubmitAIBandRequest
from ai_band_registry.storage.json_store import SubmissionStore

logger = logging.getLogger(__name__)

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
MISSING_FIELDS_MESSAGE = "Missing required fields: artistName, youtubeUrl, verificationLinks"
INVALID_URL_MESSAGE = "Invalid YouTube URL"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(value: Optional[str]) -> List[str]:
    """Split multi-line input into trimmed, non-empty lines, keeping order and duplicates."""
    if not value:
        return []
    return [line.strip() for line in _LINE_BREAK.split(value) if line.strip()]


def is_youtube_url(url: str) -> bool:
    return any(host in url for host in YOUTUBE_HOSTS)


def _utc_timestamp(now: datetime) -> str:
    # Millisecond precision with a Z suffix, e.g. 2025-01-31T09:15:00.123Z
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_submission_id(existing_ids: Iterable[str], now_ms: Optional[int] = None) -> str:
    """
    Derive an id from the current time in milliseconds.

    If the id is already taken it is bumped until it is unique.
    """
    taken = set(existing_ids)
    candidate = now_ms if now_ms is not None else int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def normalize_submission(
    request: SubmitAIBandRequest,
    submission_id: str = "",
    now: Optional[datetime] = None,
) -> Submission:
    """
    Validate raw input and build a pending Submission from it.

    Args:
        request: Raw form fields
        submission_id: Id to assign to the new submission
        now: Creation instant, defaults to the current UTC time

    Returns:
        Submission: The normalised, pending submission

    Raises:
        ValidationError: If a required field is missing or the YouTube URL is not recognised
    """
    artist_name = (request.artist_name or "").strip()
    youtube_url = (request.youtube_url or "").strip()
    verification_links = split_lines(request.verification_links)

    if not artist_name or not youtube_url or not verification_links:
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    if not is_youtube_url(youtube_url):
        raise ValidationError(INVALID_URL_MESSAGE)

    now = now or datetime.now(timezone.utc)
    return Submission(
        id=submission_id,
        timestamp=_utc_timestamp(now),
        artist_name=artist_name,
        youtube_url=youtube_url,
        verification_links=verification_links,
        other_platforms=split_lines(request.other_platforms),
        additional_info=(request.additional_info or "").strip(),
        status=SubmissionStatus.PENDING,
        reviewed=False,
    )


def submit(request: SubmitAIBandRequest, store: SubmissionStore) -> Submission:
    """
    Validate a submission and append it to the store.

    Validation happens before the store is touched, so invalid input never
    causes a file read.
    """
    submission = normalize_submission(request)

    with store.update() as records:
        submission.id = generate_submission_id(record.get("id") for record in records)
        records.append(submission.to_record())

    logger.info(f"New AI band submission: {submission.artist_name}")
    return submission
