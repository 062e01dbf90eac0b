from .algorithm import HmacAlgorithm
from .config import Config, create_hmac
from .effect import AsyncHmac, Hmac, SyncHmac
from .engine import HmacEngine
from .errors import HmacError, InvalidKey, KeyAlgorithmMismatch, UnsupportedAlgorithm
from .hash import BACKENDS, CryptographyProvider, HashlibProvider, HashProvider, get_provider
from .key import SecretKeySpec
from .mac import HMAC, HMACSHA1, HMACSHA256, HMACSHA512

__version__ = "0.1.0"

__all__ = [
    "AsyncHmac",
    "BACKENDS",
    "Config",
    "HMAC",
    "HMACSHA1",
    "HMACSHA256",
    "HMACSHA512",
    "CryptographyProvider",
    "HashProvider",
    "HashlibProvider",
    "Hmac",
    "HmacAlgorithm",
    "HmacEngine",
    "HmacError",
    "InvalidKey",
    "KeyAlgorithmMismatch",
    "SecretKeySpec",
    "SyncHmac",
    "UnsupportedAlgorithm",
    "create_hmac",
    "get_provider",
]
