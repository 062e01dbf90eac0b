import hashlib

from cryptography.hazmat.primitives import hashes

from .algorithm import HmacAlgorithm
from .errors import UnsupportedAlgorithm


def to_bytes(data, what="data") -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("%s must be bytes-like, got %s" % (what, type(data).__name__))
    return bytes(data)


class HashProvider:
    """
    One-shot digest capability for the engine.
    A provider keeps no state between calls.
    """

    name: str
    algorithms: frozenset = frozenset(HmacAlgorithm)

    def __init__(self, algorithms=None):
        if algorithms is not None:
            self.algorithms = frozenset(algorithms)

    def supports(self, algorithm) -> bool:
        return algorithm in self.algorithms

    def hash(self, algorithm: HmacAlgorithm, data: bytes) -> bytes:
        if not isinstance(algorithm, HmacAlgorithm) or not self.supports(algorithm):
            raise UnsupportedAlgorithm(algorithm, self.name)
        return self.do_hash(algorithm, to_bytes(data))

    def do_hash(self, algorithm: HmacAlgorithm, data: bytes) -> bytes:
        raise NotImplementedError

    def __repr__(self):
        return "<%s backend=%s>" % (self.__class__.__name__, self.name)


class HashlibProvider(HashProvider):
    name = "hashlib"

    def do_hash(self, algorithm, data):
        return hashlib.new(algorithm.hash_name, data).digest()


class CryptographyProvider(HashProvider):
    name = "cryptography"
    HASHES = {
        HmacAlgorithm.SHA1: hashes.SHA1,
        HmacAlgorithm.SHA256: hashes.SHA256,
        HmacAlgorithm.SHA512: hashes.SHA512,
    }

    def do_hash(self, algorithm, data):
        h = hashes.Hash(self.HASHES[algorithm]())
        h.update(data)
        return h.finalize()


BACKENDS: dict[str, type[HashProvider]] = {
    "hashlib": HashlibProvider,
    "cryptography": CryptographyProvider,
}


def get_provider(name: str, algorithms=None) -> HashProvider:
    try:
        cls = BACKENDS[name]
    except KeyError:
        raise ValueError(
            "Unknown backend %s, expected one of %s" % (name, ", ".join(BACKENDS))
        ) from None
    return cls(algorithms)
