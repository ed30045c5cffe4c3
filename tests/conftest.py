# -*- coding: utf-8 -*-
# tests/conftest.py

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure project root (which contains the `ubiregi/` package directory) is on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

ENDPOINT = "https://x/api/3/"


def make_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    """A requests.Session stand-in; queue pages with session.get.side_effect."""
    return MagicMock()
