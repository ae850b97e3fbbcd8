"""Shared fixtures for the strict XML reader tests."""

from pathlib import Path

import pytest

from strict_xml_reader import ParseEngine, ReaderConfig

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def reference_xml_path() -> Path:
    """Path to the reference document rooted at ``A``."""
    return DATA_DIR / "a.xml"


@pytest.fixture(params=[ParseEngine.EXPAT, ParseEngine.LXML], ids=["expat", "lxml"])
def config(request) -> ReaderConfig:
    """Reader configuration for each supported engine."""
    return ReaderConfig(engine=request.param)
