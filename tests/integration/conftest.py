from __future__ import annotations

from pathlib import Path

import pytest

from src.main import create_app, load_query_service


@pytest.fixture
def seeded_feed_dir(tmp_path: Path) -> Path:
    """A data directory that starts out absent, as on a first deployment."""

    return tmp_path / "deploy" / "gtfs_data"


@pytest.fixture
def seeded_app(seeded_feed_dir: Path):
    return create_app(load_query_service(seeded_feed_dir))
