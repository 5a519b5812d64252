from pathlib import Path
from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.common.counters import counters
from src.config import PACKAGE_TEMPLATE_DIR, Settings, get_settings
from src.main import app as main_app
from src.pages.config import WikiConfig


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def wiki_config(data_dir: Path) -> WikiConfig:
    return WikiConfig(data_dir=data_dir, template_dir=PACKAGE_TEMPLATE_DIR)


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    return Settings(DATA_DIR=data_dir, LOG_LEVEL="DEBUG")


@pytest.fixture
def test_app(test_settings: Settings, mocker: MockerFixture) -> Generator[FastAPI, None, None]:
    mocker.patch("src.main.settings", test_settings)
    main_app.dependency_overrides[get_settings] = lambda: test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app, follow_redirects=False) as client:
        yield client


@pytest.fixture(autouse=True)
def reset_counters() -> Generator[None, None, None]:
    yield
    counters.reset()
