from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


REPO_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    site_title: str = Field(default="Portfolio", alias="FOLIO_SITE_TITLE")
    web_host: str = Field(default="127.0.0.1", alias="FOLIO_WEB_HOST")
    web_port: int = Field(default=8800, alias="FOLIO_WEB_PORT")

    data_dir: str = Field(default="data", alias="FOLIO_DATA_DIR")
    output_dir: str = Field(default="site", alias="FOLIO_OUTPUT_DIR")
    state_dir: str = Field(default=".folio_state", alias="FOLIO_STATE_DIR")

    data_base_url: str | None = Field(default=None, alias="FOLIO_DATA_BASE_URL")
    prefers_dark: bool = Field(default=False, alias="FOLIO_PREFERS_DARK")

    def resolve_path(self, path_value: str) -> Path:
        candidate = Path(path_value).expanduser()
        if candidate.is_absolute():
            return candidate
        return REPO_ROOT / candidate

    @property
    def data_path(self) -> Path:
        return self.resolve_path(self.data_dir)

    @property
    def output_path(self) -> Path:
        return self.resolve_path(self.output_dir)

    @property
    def state_path(self) -> Path:
        return self.resolve_path(self.state_dir)

    @property
    def preferences_path(self) -> Path:
        return self.state_path / "preferences.json"

    def data_source(self, name: str) -> str:
        """Location of a data document, either under the remote base URL or the local data dir."""
        filename = f"{name}.json"
        if self.data_base_url:
            return f"{self.data_base_url.rstrip('/')}/{filename}"
        return str(self.data_path / filename)

    def ensure_runtime_dirs(self) -> None:
        self.state_path.mkdir(parents=True, exist_ok=True)
        self.output_path.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = Settings()
    settings.ensure_runtime_dirs()
    return settings
