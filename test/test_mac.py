import hmac
import os

import pytest

from hmackit import (
    HMACSHA1,
    HMACSHA256,
    HMACSHA512,
    HmacAlgorithm,
    KeyAlgorithmMismatch,
    SecretKeySpec,
    get_provider,
)


@pytest.mark.parametrize("cls", [HMACSHA1, HMACSHA256, HMACSHA512])
def test_digest(backend, cls):
    key = os.urandom(cls.size)
    mac = cls(key, get_provider(backend))
    for _ in range(10):
        data = os.urandom(64)
        tag = mac.digest(data)
        assert len(tag) == cls.size == cls.algorithm.output_size
        assert tag == hmac.digest(key, data, cls.algorithm.hash_name)
        assert mac.verify(data, tag)


def test_generate(backend):
    mac = HMACSHA512.generate(get_provider(backend))
    assert mac.key.algorithm is HmacAlgorithm.SHA512
    assert len(mac.key) >= 64
    assert mac.engine.backend == backend


def test_provider_required():
    with pytest.raises(TypeError):
        HMACSHA256(b"key")


def test_key_spec_for_other_algorithm():
    provider = get_provider("hashlib")
    with pytest.raises(KeyAlgorithmMismatch):
        HMACSHA256(SecretKeySpec(b"key", HmacAlgorithm.SHA1), provider).digest(b"data")
    assert HMACSHA1(SecretKeySpec(b"key", HmacAlgorithm.SHA1), provider).digest(b"data")
