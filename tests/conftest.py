from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the directory package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from directory.core import config as core_config  # noqa: E402
from directory.repositories.json_storage import EmployeeStore  # noqa: E402


@pytest.fixture()
def data_file(tmp_path):
    """Path to a backing file that does not exist yet, inside a missing directory."""
    return tmp_path / "nested" / "employees.json"


@pytest.fixture()
def store(data_file):
    return EmployeeStore(data_file)


@pytest.fixture()
def settings(data_file):
    return core_config.Settings(
        app_env="test",
        data_file=data_file,
        public_base_url="http://testserver",
        log_level="DEBUG",
    )


@pytest.fixture()
def ada_body():
    return {
        "name": "Ada",
        "title": "Engineer",
        "department": "R&D",
        "location": "Remote",
        "salary": 120000.4,
        "hireDate": "2024-01-15",
    }
