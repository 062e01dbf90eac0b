import logging

import curio

from .engine import HmacEngine
from .key import SecretKeySpec

logger = logging.getLogger("hmackit")


class Hmac:
    """
    Common surface of the sync and async adapters.
    Adapters do no cryptography, they only decide how the engine is called.
    """

    mode: str

    def __init__(self, engine: HmacEngine):
        self.engine = engine

    @property
    def backend(self) -> str:
        return self.engine.backend

    @property
    def algorithms(self):
        return self.engine.provider.algorithms

    def __repr__(self):
        return "<%s backend=%s>" % (self.__class__.__name__, self.backend)


class SyncHmac(Hmac):
    mode = "sync"

    def digest(self, key: SecretKeySpec, message: bytes, algorithm=None) -> bytes:
        return self.engine.compute(key, message, algorithm)

    def verify(self, key: SecretKeySpec, message: bytes, tag: bytes, algorithm=None) -> bool:
        return self.engine.verify(key, message, tag, algorithm)

    def generate_key(self, algorithm) -> SecretKeySpec:
        return self.engine.generate_key(algorithm)


class AsyncHmac(Hmac):
    """
    curio flavour of SyncHmac.
    Each call is handed to a worker thread in one piece, so the task only
    suspends around the whole computation, never between the inner and
    outer hash. Exceptions from the worker are re-raised as is.
    """

    mode = "async"

    async def _call(self, func, *args):
        logger.debug("handing %s to worker thread", func.__name__)
        return await curio.run_in_thread(func, *args)

    async def digest(self, key: SecretKeySpec, message: bytes, algorithm=None) -> bytes:
        return await self._call(self.engine.compute, key, message, algorithm)

    async def verify(self, key: SecretKeySpec, message: bytes, tag: bytes, algorithm=None) -> bool:
        return await self._call(self.engine.verify, key, message, tag, algorithm)

    async def generate_key(self, algorithm) -> SecretKeySpec:
        return await self._call(self.engine.generate_key, algorithm)
