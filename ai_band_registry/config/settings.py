from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

# Define the root directory of the ai_band_registry package
SERVICE_ROOT_DIR = Path(__file__).parent.parent.resolve()
# Path to the repository root (one level up from the package)
PROJECT_ROOT_DIR = SERVICE_ROOT_DIR.parent


class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "AIBandRegistry"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # Shared secret for the admin endpoints. Unset means admin access is closed.
    ADMIN_TOKEN: Optional[str] = None

    # Data files; relative paths are resolved against DATA_DIR
    DATA_DIR: Path = Path(".")
    SUBMISSIONS_FILE: str = "submissions.json"
    AI_BANDS_FILE: str = "ai-bands.json"
    YOUTUBE_CONFIG_FILE: str = "YoutubeConfig.json"

    # CORS settings
    CORS_ORIGINS: Union[str, list[str]] = "*"
    CORS_ALLOW_METHODS: Union[str, list[str]] = "GET,POST"
    CORS_ALLOW_HEADERS: Union[str, list[str]] = "*"

    # Logging configuration path (can be overridden by env var)
    LOGGING_CONFIG_PATH: str = str(SERVICE_ROOT_DIR / "config" / "logging_config.yaml")

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT_DIR / ".env"),  # Load variables from project root .env
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def model_post_init(self, __context) -> None:
        """Parse comma-separated strings into lists after model initialization."""
        self.CORS_ORIGINS = self._split(self.CORS_ORIGINS)
        self.CORS_ALLOW_METHODS = self._split(self.CORS_ALLOW_METHODS)
        self.CORS_ALLOW_HEADERS = self._split(self.CORS_ALLOW_HEADERS)

    @staticmethod
    def _split(value: Union[str, list[str]]) -> list[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def resolve_data_path(self, filename: Union[str, Path]) -> Path:
        """Resolve a data file name against DATA_DIR unless it is already absolute."""
        path = Path(filename)
        if path.is_absolute():
            return path
        return self.DATA_DIR / path

    @property
    def submissions_path(self) -> Path:
        return self.resolve_data_path(self.SUBMISSIONS_FILE)

    @property
    def ai_bands_path(self) -> Path:
        return self.resolve_data_path(self.AI_BANDS_FILE)

    @property
    def youtube_config_path(self) -> Path:
        return self.resolve_data_path(self.YOUTUBE_CONFIG_FILE)


# Instantiate settings
settings = Settings()


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings


# Example usage:
if __name__ == "__main__":
    print(f"Running {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"Submissions file: {settings.submissions_path}")
    print(f"AI bands file: {settings.ai_bands_path}")
    print(f"Admin token configured: {bool(settings.ADMIN_TOKEN)}")
    print(f"Logging config: {settings.LOGGING_CONFIG_PATH}")
