import pytest

from paplu.tests.helpers import create_players


@pytest.fixture
def players():
    return create_players("a", "b", "c")
