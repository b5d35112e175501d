import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parents[1] / "src"))

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_path():
    """Return the path of a file under tests/fixtures."""

    def _fixture_path(name: str) -> Path:
        return FIXTURE_DIR / name

    return _fixture_path


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file in the given encoding."""

    def _write_csv(name: str, text: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write_csv
