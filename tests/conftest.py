import pytest

from samples import build_document


@pytest.fixture
def document():
    return build_document()
