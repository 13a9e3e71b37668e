"""Pytest fixtures shared across testhealth tests."""

import json

import pytest


@pytest.fixture
def snapshot_data():
    """Parsed snapshot with one full chain and one orphaned suite."""
    from testhealth.models import TestResultData
    from tests.helpers import snapshot_dict

    return TestResultData.from_dict(snapshot_dict())


@pytest.fixture
def snapshot_file(tmp_path):
    """The same snapshot written to a JSON file."""
    from tests.helpers import snapshot_dict

    path = tmp_path / "results.json"
    path.write_text(json.dumps(snapshot_dict()), encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run from an empty directory with no TESTHEALTH_* environment."""
    import os

    for key in list(os.environ):
        if key.startswith("TESTHEALTH_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir
