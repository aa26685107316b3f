from folio.core.config import REPO_ROOT, Settings


def test_empty_optional_env_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("FOLIO_DATA_BASE_URL", "")
    settings = Settings(_env_file=None)
    assert settings.data_base_url is None


def test_repo_root_and_default_paths() -> None:
    settings = Settings(_env_file=None)
    assert (REPO_ROOT / "pyproject.toml").exists()
    assert settings.data_path == REPO_ROOT / "data"
    assert settings.output_path == REPO_ROOT / "site"
    assert settings.preferences_path == REPO_ROOT / ".folio_state" / "preferences.json"
    assert settings.web_port == 8800


def test_data_source_prefers_remote_base_url(tmp_path) -> None:
    local = Settings(_env_file=None, FOLIO_DATA_DIR=str(tmp_path))
    remote = Settings(_env_file=None, FOLIO_DATA_BASE_URL="https://example.com/data/")

    assert local.data_source("projects") == str(tmp_path / "projects.json")
    assert remote.data_source("projects") == "https://example.com/data/projects.json"


def test_prefers_dark_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("FOLIO_PREFERS_DARK", "true")
    assert Settings(_env_file=None).prefers_dark is True
