"""Tests for the approve/reject review workflow."""

from unittest.mock import patch

import pytest

from ai_band_registry.core.exceptions import NotFoundError, StorageError, ValidationError
from ai_band_registry.core.review import AI_GENERATED_TAG, build_catalog_entry, review_submission
from ai_band_registry.models.dtos import Submission, SubmissionStatus
from ai_band_registry.storage.json_store import CatalogStore
from ai_band_registry.tests.factories import make_submission_record, read_json, write_json

EXISTING_BAND = {"name": "Existing Band", "dateAdded": "2024-05-01", "tags": ["ai-generated"], "notes": "manual"}


@pytest.fixture
def stores(submission_store, catalog_store):
    write_json(
        submission_store.path,
        [
            make_submission_record("1", otherPlatforms=["https://open.spotify.com/x", "https://tiktok.com/@y"]),
            make_submission_record("2", artistName="Other Band", additionalInfo="Found on a playlist"),
        ],
    )
    write_json(catalog_store.path, [EXISTING_BAND])
    return submission_store, catalog_store


class TestBuildCatalogEntry:
    """Test cases for deriving a catalog entry from a submission."""

    def test_copies_submission_fields(self):
        submission = Submission.model_validate(
            make_submission_record("7", additionalInfo="Label confirmed it")
        )

        record = build_catalog_entry(submission, today="2025-02-03").to_record()

        assert record == {
            "name": "Velvet Sundown",
            "dateAdded": "2025-02-03",
            "dateUpdated": None,
            "comments": "Label confirmed it",
            "tags": [AI_GENERATED_TAG],
            "youtube": "https://www.youtube.com/@velvetsundown",
            "urls": ["https://example.com/article", "https://example.com/thread"],
        }

    def test_empty_additional_info_becomes_null_comment(self):
        submission = Submission.model_validate(make_submission_record(additionalInfo=""))

        assert build_catalog_entry(submission).comments is None

    def test_urls_are_a_copy(self):
        submission = Submission.model_validate(make_submission_record())
        entry = build_catalog_entry(submission)

        entry.urls.append("https://example.com/extra")

        assert len(submission.verification_links) == 2

    def test_platform_fields_from_other_platforms(self):
        submission = Submission.model_validate(
            make_submission_record(otherPlatforms=["https://open.spotify.com/x", "https://tiktok.com/@y"])
        )

        record = build_catalog_entry(submission).to_record()

        assert record["spotify"] == "https://open.spotify.com/x"
        assert record["tiktok"] == "https://tiktok.com/@y"
        for field in ("apple", "instagram", "amazon"):
            assert field not in record

    def test_date_added_defaults_to_today(self):
        submission = Submission.model_validate(make_submission_record())

        entry = build_catalog_entry(submission)

        assert len(entry.date_added) == 10
        assert entry.date_added.count("-") == 2


class TestReviewSubmission:
    """Test cases for review_submission."""

    def test_approve_appends_one_catalog_entry(self, stores):
        submissions, catalog = stores

        result = review_submission("1", "approve", submissions, catalog)

        bands = read_json(catalog.path)
        assert len(bands) == 2
        assert bands[0] == EXISTING_BAND
        assert bands[1]["youtube"] == "https://www.youtube.com/@velvetsundown"
        assert bands[1]["spotify"] == "https://open.spotify.com/x"
        assert bands[1]["tiktok"] == "https://tiktok.com/@y"
        assert result.status is SubmissionStatus.APPROVED
        assert result.reviewed is True

    def test_approve_persists_submission_state(self, stores):
        submissions, catalog = stores

        review_submission("1", "approve", submissions, catalog)

        records = read_json(submissions.path)
        assert records[0]["status"] == "approved"
        assert records[0]["reviewed"] is True
        assert records[1]["status"] == "pending"
        assert records[1]["reviewed"] is False

    def test_reject_leaves_catalog_untouched(self, stores):
        submissions, catalog = stores
        before = catalog.path.read_text(encoding="utf-8")

        result = review_submission("2", "reject", submissions, catalog)

        assert catalog.path.read_text(encoding="utf-8") == before
        records = read_json(submissions.path)
        assert records[1]["status"] == "rejected"
        assert records[1]["reviewed"] is True
        assert result.status is SubmissionStatus.REJECTED

    def test_unknown_id_raises_not_found(self, stores):
        submissions, catalog = stores
        before = submissions.path.read_text(encoding="utf-8")

        with pytest.raises(NotFoundError):
            review_submission("does-not-exist", "approve", submissions, catalog)

        assert submissions.path.read_text(encoding="utf-8") == before
        assert len(read_json(catalog.path)) == 1

    def test_unknown_action_raises_validation_error(self, stores):
        submissions, catalog = stores

        with pytest.raises(ValidationError):
            review_submission("1", "delete", submissions, catalog)

    def test_repeated_approval_duplicates_catalog_entry(self, stores):
        """Approval is not idempotent: a second approve publishes a second entry."""
        submissions, catalog = stores

        review_submission("1", "approve", submissions, catalog)
        review_submission("1", "approve", submissions, catalog)

        bands = read_json(catalog.path)
        assert len(bands) == 3
        assert bands[1]["name"] == bands[2]["name"] == "Velvet Sundown"

    def test_approve_to_alternate_catalog(self, stores, tmp_path):
        submissions, catalog = stores
        alternate = CatalogStore(tmp_path / "alt-bands.json")
        write_json(alternate.path, [])

        review_submission("1", "approve", submissions, alternate)

        assert len(read_json(alternate.path)) == 1
        assert read_json(catalog.path) == [EXISTING_BAND]

    def test_unknown_record_keys_are_preserved(self, stores):
        submissions, catalog = stores
        write_json(submissions.path, [make_submission_record("1", reviewerNote="check later")])

        review_submission("1", "reject", submissions, catalog)

        assert read_json(submissions.path)[0]["reviewerNote"] == "check later"

    def test_missing_catalog_file_raises_storage_error(self, stores):
        submissions, catalog = stores
        catalog.path.unlink()

        with pytest.raises(StorageError):
            review_submission("1", "approve", submissions, catalog)

        # Submission state is not written when the catalog write fails
        assert read_json(submissions.path)[0]["status"] == "pending"

    def test_malformed_submission_raises_storage_error(self, stores):
        submissions, catalog = stores
        write_json(submissions.path, [{"id": "1", "status": "pending"}])

        with pytest.raises(StorageError):
            review_submission("1", "approve", submissions, catalog)

    def test_catalog_failure_during_save_is_propagated(self, stores):
        submissions, catalog = stores

        with patch.object(CatalogStore, "save_all", side_effect=StorageError("disk full")):
            with pytest.raises(StorageError, match="disk full"):
                review_submission("1", "approve", submissions, catalog)
