"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

# Keep tests independent from a developer's .env / shell overrides
os.environ.setdefault("OCCAM_LOG_FORMAT", "text")
os.environ.setdefault("OCCAM_LOG_LEVEL", "INFO")

from occam_razor.core.prompt_catalog import build_prompt_catalog  # noqa: E402
from occam_razor.core.stage_transition import StageTransitionEngine  # noqa: E402
from occam_razor.services.tool_dispatch import ToolDispatch  # noqa: E402


@pytest.fixture
def catalog():
    return build_prompt_catalog()


@pytest.fixture
def engine(catalog):
    return StageTransitionEngine(catalog)


@pytest.fixture
def dispatch(engine):
    return ToolDispatch(engine)
