"""Global test configuration for chunkline tests."""

import pytest
import structlog

from chunkline.chunking import SplitterConfig

REPORT_MD = """# Quarterly Report

Revenue grew steadily this year.

| Quarter | Revenue | Growth |
|---------|---------|--------|
| Q1 2024 | 650 | 32% |
| Q2 2024 | 720 | 38% |
| Q3 2024 | 695 | 33% |
| Q4 2024 | 735 | 37% |
| Total | 2800 | 35% |

Margins improved in every quarter.
"""

REPORT_TABLE = """| Quarter | Revenue | Growth |
|---------|---------|--------|
| Q1 2024 | 650 | 32% |
| Q2 2024 | 720 | 38% |
| Q3 2024 | 695 | 33% |
| Q4 2024 | 735 | 37% |
| Total | 2800 | 35% |"""


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests configure structlog against the runner's streams; undo that."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def report_md():
    return REPORT_MD


@pytest.fixture
def report_table():
    return REPORT_TABLE


@pytest.fixture
def diagnostics():
    """Collects diagnostics delivered by a ChunkProducer."""
    return []


@pytest.fixture
def config_factory():
    def make(chunk_size=10, chunk_overlap=0, **kwargs):
        return SplitterConfig(chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)

    return make
