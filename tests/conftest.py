"""Shared pytest fixtures for gcide_dict tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from gcide_dict.normalize import UnknownEntityLog
from gcide_dict.pipeline import Settings


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def cide_text(fixtures_dir: Path) -> str:
    """Load the CIDE.C sample source file."""
    return (fixtures_dir / "CIDE.C").read_text(encoding="utf-8")


@pytest.fixture
def unknown() -> UnknownEntityLog:
    """A fresh, empty unknown entity log."""
    return UnknownEntityLog()


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for file output tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_dir(temp_output_dir: Path, fixtures_dir: Path) -> Path:
    """A source directory holding a copy of CIDE.C and a file that must be ignored."""
    src = temp_output_dir / "srcFiles"
    src.mkdir()
    shutil.copy(fixtures_dir / "CIDE.C", src / "CIDE.C")
    (src / "README").write_text("<p><ent>Ignored</ent></p>", encoding="utf-8")
    return src


@pytest.fixture
def settings(temp_output_dir: Path, source_dir: Path) -> Settings:
    """Settings pointing all input and output into the temporary directory."""
    return Settings(
        source_dir=source_dir,
        output_dir=temp_output_dir / "output",
        xml_path=temp_output_dir / "template" / "dict.xml",
    )
