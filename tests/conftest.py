"""
Shared test fixtures and helpers for the controllerkit test suite.
"""

import pytest

from controllerkit import CrudController
from controllerkit.testing import MemoryModel, RecordingResponse, RecordingRouter


VIEW_ROOT = "views/some/path"
URL_ROOT = "/mount/point/"
HUMAN_NAME = "Nothing here, move along"


# ============================================================================
# Collaborators
# ============================================================================


@pytest.fixture
def router():
    return RecordingRouter()


@pytest.fixture
def res():
    return RecordingResponse()


@pytest.fixture
def model():
    return MemoryModel([
        {"id": "1", "title": "First", "is_active": True},
        {"id": "2", "title": "Second", "is_active": False},
    ])


# ============================================================================
# Controllers
# ============================================================================


def make_crud(model, **kwargs) -> CrudController:
    """Build a CrudController with the suite's default roots."""
    params = {
        "view_root": VIEW_ROOT,
        "url_root": URL_ROOT,
        "human_name": HUMAN_NAME,
        "model": model,
    }
    params.update(kwargs)
    cls = params.pop("cls", CrudController)
    return cls(**params)


@pytest.fixture
def crud(model):
    return make_crud(model)
