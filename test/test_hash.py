import hashlib
import os

import pytest

from hmackit import BACKENDS, HashlibProvider, HmacAlgorithm, UnsupportedAlgorithm, get_provider


@pytest.mark.parametrize("algorithm", list(HmacAlgorithm))
def test_hash(backend, algorithm):
    data = os.urandom(300)
    digest = get_provider(backend).hash(algorithm, data)
    assert len(digest) == algorithm.output_size
    assert digest == hashlib.new(algorithm.hash_name, data).digest()


def test_backends_agree():
    data = os.urandom(1024)
    for algorithm in HmacAlgorithm:
        assert len({get_provider(name).hash(algorithm, data) for name in BACKENDS}) == 1


def test_restricted_provider(backend):
    provider = get_provider(backend, algorithms=[HmacAlgorithm.SHA1])
    assert provider.supports(HmacAlgorithm.SHA1)
    assert not provider.supports(HmacAlgorithm.SHA512)
    with pytest.raises(UnsupportedAlgorithm) as e:
        provider.hash(HmacAlgorithm.SHA512, b"data")
    assert e.value.backend == backend


def test_not_an_algorithm():
    with pytest.raises(UnsupportedAlgorithm):
        HashlibProvider().hash("sha256", b"data")


def test_unknown_backend():
    with pytest.raises(ValueError):
        get_provider("openssl-fips")


@pytest.mark.parametrize("data", [3, "abc", None])
def test_data_must_be_bytes(backend, data):
    with pytest.raises(TypeError):
        get_provider(backend).hash(HmacAlgorithm.SHA256, data)
