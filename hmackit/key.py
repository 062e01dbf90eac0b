from dataclasses import dataclass

from .algorithm import HmacAlgorithm
from .errors import InvalidKey


@dataclass(frozen=True, repr=False)
class SecretKeySpec:
    key: bytes
    algorithm: HmacAlgorithm

    def __post_init__(self):
        if isinstance(self.key, str) or not isinstance(self.key, (bytes, bytearray, memoryview)):
            raise InvalidKey("key must be bytes, got %s" % type(self.key).__name__)
        # copy so a caller's bytearray can't change the key later
        object.__setattr__(self, "key", bytes(self.key))
        if not self.key:
            raise InvalidKey("key must not be empty")
        object.__setattr__(self, "algorithm", HmacAlgorithm.from_name(self.algorithm))

    @classmethod
    def from_hex(cls, data: str, algorithm) -> "SecretKeySpec":
        try:
            key = bytes.fromhex(data)
        except ValueError:
            raise InvalidKey("key is not valid hex") from None
        return cls(key, algorithm)

    def hex(self) -> str:
        return self.key.hex()

    def __len__(self):
        return len(self.key)

    def __repr__(self):
        # key bytes are never shown
        return "SecretKeySpec(algorithm=%s, length=%d)" % (self.algorithm, len(self.key))
