import enum

from .errors import UnsupportedAlgorithm


class HmacAlgorithm(enum.Enum):
    # name, block size, output size, minimum generated key length (bytes)
    SHA1 = ("sha1", 64, 160 // 8, 20)
    SHA256 = ("sha256", 64, 256 // 8, 32)
    SHA512 = ("sha512", 128, 512 // 8, 64)

    def __init__(self, hash_name: str, block_size: int, output_size: int, minimum_key_length: int):
        self.hash_name = hash_name
        self.block_size = block_size
        self.output_size = output_size
        self.minimum_key_length = minimum_key_length

    def __str__(self):
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "HmacAlgorithm":
        """
        Resolve an algorithm from a loose name.
        "sha256", "SHA-256" and "HmacSHA256" all give SHA256.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).upper().replace("-", "").replace("_", "")
        if normalized.startswith("HMAC"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError:
            raise UnsupportedAlgorithm(name) from None
