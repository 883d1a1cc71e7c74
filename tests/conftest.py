import pytest

from skylut.atmosphere.profiles import earth_profile, toy_profile


@pytest.fixture
def earth():
    """Literal Earth atmosphere in kilometers."""
    return earth_profile


@pytest.fixture
def toy():
    """Toy planet atmosphere in kilometers."""
    return toy_profile
