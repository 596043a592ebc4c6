import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml
except ModuleNotFoundError as exc:  # pragma: no cover - import guard
    raise ModuleNotFoundError(
        "PyYAML is required to load application configuration. Install it via 'pip install pyyaml'."
    ) from exc
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_APP_CONFIG_PATH = "config/app.yaml"
DEFAULT_CORPUS_PATH = "/tmp/trump/trump.json"


class VerificationSettings(BaseModel):
    similarity_threshold: float = Field(0.7, ge=0.0, le=1.0)
    max_candidates: int = Field(50, ge=1)
    min_word_length: int = Field(4, ge=1)

    class Config:
        extra = "ignore"


class TelemetrySettings(BaseModel):
    log_level: str = "INFO"
    metrics_enabled: bool = True

    class Config:
        extra = "ignore"


class AppConfig(BaseModel):
    verification: VerificationSettings = Field(default_factory=VerificationSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    class Config:
        extra = "ignore"


def _resolve_config_path(path_str: str) -> Path:
    candidate = Path(path_str).expanduser()
    if not candidate.is_absolute():
        candidate = (PROJECT_ROOT / candidate).resolve()
    return candidate


def _load_app_config(path: Path) -> AppConfig:
    if not path.exists():
        logger.warning("App config file %s not found; using defaults", path)
        return AppConfig()
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw: Dict[str, Any] = yaml.safe_load(handle) or {}
    except Exception as exc:  # pragma: no cover - configuration failures are fatal
        logger.error("Failed to load app config from %s: %s", path, exc)
        raise
    return AppConfig(**raw)


@lru_cache(maxsize=4)
def _load_app_config_cached(resolved_path: str) -> AppConfig:
    return _load_app_config(Path(resolved_path))


def get_app_config(path_str: str) -> AppConfig:
    resolved = _resolve_config_path(path_str)
    return _load_app_config_cached(str(resolved))


class Settings(BaseSettings):
    # Reference corpus
    corpus_path: str = Field(DEFAULT_CORPUS_PATH, description="Path to the JSON dump of reference posts")

    # App configuration
    app_config_path: str = Field(
        DEFAULT_APP_CONFIG_PATH,
        description="Path to the YAML configuration file controlling verification and telemetry.",
    )

    # Overrides for values in the YAML config
    similarity_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)
    log_level: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="TRUTHCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def resolved_app_config_path(self) -> Path:
        return _resolve_config_path(self.app_config_path)

    @property
    def app_config(self) -> AppConfig:
        return get_app_config(self.app_config_path)

    @property
    def verification(self) -> VerificationSettings:
        base = self.app_config.verification
        if self.similarity_threshold is None:
            return base
        return base.model_copy(update={"similarity_threshold": self.similarity_threshold})

    @property
    def effective_log_level(self) -> str:
        return self.log_level or self.app_config.telemetry.log_level


# Initialize settings
settings = Settings()
