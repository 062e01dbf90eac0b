from .algorithm import HmacAlgorithm
from .engine import HmacEngine
from .hash import HashProvider
from .key import SecretKeySpec


class HMAC:
    """A key bound to one algorithm and backend."""

    algorithm: HmacAlgorithm
    size: int

    def __init__(self, key, provider: HashProvider):
        if isinstance(key, SecretKeySpec):
            self.key = key
        else:
            self.key = SecretKeySpec(key, self.algorithm)
        self.engine = HmacEngine(provider)

    def digest(self, data: bytes) -> bytes:
        return self.engine.compute(self.key, data, self.algorithm)

    def verify(self, data: bytes, tag: bytes) -> bool:
        return self.engine.verify(self.key, data, tag, self.algorithm)

    @classmethod
    def generate(cls, provider: HashProvider) -> "HMAC":
        return cls(HmacEngine(provider).generate_key(cls.algorithm), provider)


class HMACSHA256(HMAC):
    algorithm = HmacAlgorithm.SHA256
    size = 256 // 8


class HMACSHA512(HMAC):
    algorithm = HmacAlgorithm.SHA512
    size = 512 // 8


class HMACSHA1(HMAC):
    algorithm = HmacAlgorithm.SHA1
    size = 160 // 8
