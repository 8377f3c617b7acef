from pathlib import Path

import pytest
from faker import Faker
from upload_service.models.store_directive import StoreDirective
from upload_service.schemas import UPLOAD_BASE_URL
from upload_service.settings import UploadServiceSettings, get_settings

fake = Faker()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "UPLOADCARE_PUBLIC_KEY",
        "UPLOADCARE_UPLOAD_BASE_URL",
        "UPLOADCARE_DEFAULT_STORE",
        "UPLOADCARE_TIMEOUT_SEC",
        "UPLOADCARE_SIGNATURE",
        "UPLOADCARE_EXPIRE",
        "UPLOADCARE_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    public_key = fake.sha1()
    monkeypatch.setenv("UPLOADCARE_PUBLIC_KEY", public_key)

    config = UploadServiceSettings().to_config()  # type: ignore[call-arg]

    assert config.public_key == public_key
    assert config.upload_base_url == UPLOAD_BASE_URL
    assert config.default_store is StoreDirective.AUTO
    assert config.headers == {}
    assert config.signature is None
    assert config.expire is None


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    user_agent = fake.user_agent()
    monkeypatch.setenv("UPLOADCARE_PUBLIC_KEY", "demopublickey")
    monkeypatch.setenv("UPLOADCARE_UPLOAD_BASE_URL", "upload.example.com")
    monkeypatch.setenv("UPLOADCARE_DEFAULT_STORE", "1")
    monkeypatch.setenv("UPLOADCARE_TIMEOUT_SEC", "5.5")
    monkeypatch.setenv("UPLOADCARE_SIGNATURE", "deadbeef")
    monkeypatch.setenv("UPLOADCARE_EXPIRE", "1700000000")
    monkeypatch.setenv("UPLOADCARE_USER_AGENT", user_agent)

    config = UploadServiceSettings().to_config()  # type: ignore[call-arg]

    assert config.upload_base_url == "upload.example.com"
    assert config.default_store is StoreDirective.STORE
    assert config.timeout_sec == 5.5
    assert config.signature == "deadbeef"
    assert config.expire == 1_700_000_000
    assert config.headers == {"User-Agent": user_agent}


def test_settings_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("UPLOADCARE_PUBLIC_KEY=fromfile\n")

    assert UploadServiceSettings().public_key == "fromfile"  # type: ignore[call-arg]


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPLOADCARE_PUBLIC_KEY", fake.sha1())

    assert get_settings() is get_settings()
