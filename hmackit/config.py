from dataclasses import dataclass

from .effect import AsyncHmac, SyncHmac
from .engine import HmacEngine
from .hash import BACKENDS, get_provider

MODES = {
    "sync": SyncHmac,
    "async": AsyncHmac,
}


@dataclass(frozen=True)
class Config:
    backend: str = "hashlib"
    mode: str = "sync"

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError("Unknown backend %s" % self.backend)
        if self.mode not in MODES:
            raise ValueError("mode must be one of %s, got %s" % (", ".join(MODES), self.mode))


def create_hmac(config: Config | None = None, **kwargs):
    """
    Build an adapter for the given config.
    Extra keyword arguments (e.g. random_bytes) go to HmacEngine.
    """
    config = config or Config()
    engine = HmacEngine(get_provider(config.backend), **kwargs)
    return MODES[config.mode](engine)
