import pytest

from catalog_api.core.taxonomy import get_registry
from tests.fixtures.catalog_fixtures import mixed_catalog


@pytest.fixture
def taxonomy():
    return get_registry()


@pytest.fixture
def items():
    return mixed_catalog()
