from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from ai_band_registry.api.main import create_app
from ai_band_registry.config.settings import Settings
from ai_band_registry.storage.json_store import CatalogStore, SubmissionStore
from ai_band_registry.tests.factories import ADMIN_TOKEN, YOUTUBE_CONFIG, write_json


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory with empty stores and a plugin config."""
    write_json(tmp_path / "submissions.json", [])
    write_json(tmp_path / "ai-bands.json", [])
    write_json(tmp_path / "YoutubeConfig.json", YOUTUBE_CONFIG)
    return tmp_path


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        ADMIN_TOKEN=ADMIN_TOKEN,
        DATA_DIR=data_dir,
        LOGGING_CONFIG_PATH=str(data_dir / "no-logging-config.yaml"),
    )


@pytest.fixture
def submission_store(test_settings: Settings) -> SubmissionStore:
    return SubmissionStore(test_settings.submissions_path)


@pytest.fixture
def catalog_store(test_settings: Settings) -> CatalogStore:
    return CatalogStore(test_settings.ai_bands_path)


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    return TestClient(create_app(test_settings))


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
