"""FastAPI dependencies providing the file-backed stores and the submission body."""

import json
from typing import Any, Dict

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from ai_band_registry.config.settings import Settings, get_settings
from ai_band_registry.models.dtos import SubmitAIBandRequest
from ai_band_registry.storage.json_store import CatalogStore, SubmissionStore

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_submission_store(settings: Settings = Depends(get_settings)) -> SubmissionStore:
    return SubmissionStore(settings.submissions_path)


def get_catalog_store(settings: Settings = Depends(get_settings)) -> CatalogStore:
    return CatalogStore(settings.ai_bands_path)


async def parse_submission_body(request: Request) -> SubmitAIBandRequest:
    """
    Read a submission from either a JSON body or an HTML form post.

    Field names are the same camelCase keys in both encodings. Malformed
    bodies raise RequestValidationError so they share the 400 error shape.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    data: Any
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        data = dict(form)
    else:
        body = await request.body()
        if not body.strip():
            data = {}
        else:
            try:
                data = json.loads(body)
            except ValueError as e:
                raise RequestValidationError(
                    [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}", "input": None}]
                ) from e

    try:
        return SubmitAIBandRequest.model_validate(data)
    except PydanticValidationError as e:
        errors: list[Dict[str, Any]] = [
            {**error, "loc": ("body", *error.get("loc", ()))} for error in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors) from e
