import json
from pathlib import Path

import pytest

from relcheck.settings import Settings

SAMPLE_DATA_DIR = Path(__file__).parent / 'sample_data'
LATEST_RELEASE_URL = 'https://api.github.com/repos/pyinat/naturtag/releases/latest'


@pytest.fixture
def sample_release() -> dict:
    with open(SAMPLE_DATA_DIR / 'latest_release.json') as f:
        return json.load(f)


@pytest.fixture
def latest_url() -> str:
    return LATEST_RELEASE_URL


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(path=tmp_path / 'settings.yml')
