import pytest

from hmackit import BACKENDS, HmacEngine, get_provider


@pytest.fixture(params=sorted(BACKENDS))
def backend(request):
    return request.param


@pytest.fixture
def engine(backend):
    return HmacEngine(get_provider(backend))
