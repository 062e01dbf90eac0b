import hmac
import logging
import os
from typing import Callable

from .algorithm import HmacAlgorithm
from .errors import KeyAlgorithmMismatch, UnsupportedAlgorithm
from .hash import HashProvider, to_bytes
from .key import SecretKeySpec

logger = logging.getLogger("hmackit")

IPAD = 0x36
OPAD = 0x5C


def xor_pad(key: bytes, pad: int, block_size: int) -> bytes:
    # key is implicitly right padded with zeros, so the tail is the pad byte itself
    return bytes(b ^ pad for b in key) + bytes([pad]) * (block_size - len(key))


class HmacEngine:
    def __init__(
        self,
        provider: HashProvider,
        random_bytes: Callable[[int], bytes] = os.urandom,
    ):
        self.provider = provider
        self.random_bytes = random_bytes

    @property
    def backend(self) -> str:
        return self.provider.name

    def compute(self, key: SecretKeySpec, message: bytes, algorithm=None) -> bytes:
        """
        HMAC as described in RFC 2104.
        :param key: secret key, tagged with the algorithm it is meant for
        :param message: data to authenticate
        :param algorithm: expected algorithm, checked against the key's
        """
        algo = key.algorithm
        if algorithm is not None:
            algorithm = HmacAlgorithm.from_name(algorithm)
            if algorithm is not algo:
                raise KeyAlgorithmMismatch(algo, algorithm)
        message = to_bytes(message, "message")
        block_size = algo.block_size
        k = key.key
        if len(k) > block_size:
            logger.debug("key longer than %s block size (%d), hashing it first", algo, block_size)
            k = self.provider.hash(algo, k)
        inner = self.provider.hash(algo, xor_pad(k, IPAD, block_size) + message)
        tag = self.provider.hash(algo, xor_pad(k, OPAD, block_size) + inner)
        assert len(tag) == algo.output_size, "%s digest is %d bytes" % (algo, len(tag))
        return tag

    def verify(self, key: SecretKeySpec, message: bytes, tag: bytes, algorithm=None) -> bool:
        tag = to_bytes(tag, "tag")
        return hmac.compare_digest(self.compute(key, message, algorithm), tag)

    def generate_key(self, algorithm) -> SecretKeySpec:
        algorithm = HmacAlgorithm.from_name(algorithm)
        if not self.provider.supports(algorithm):
            raise UnsupportedAlgorithm(algorithm, self.backend)
        logger.debug("generating %d byte key for %s", algorithm.minimum_key_length, algorithm)
        return SecretKeySpec(self.random_bytes(algorithm.minimum_key_length), algorithm)

    def __repr__(self):
        return "<HmacEngine backend=%s>" % self.backend
