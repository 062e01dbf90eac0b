class HmacError(Exception):
    pass


class UnsupportedAlgorithm(HmacError):
    def __init__(self, algorithm, backend=None):
        self.algorithm = algorithm
        self.backend = backend
        if backend:
            super().__init__("%s is not supported by the %s backend" % (algorithm, backend))
        else:
            super().__init__("Unsupported algorithm %s" % (algorithm,))


class KeyAlgorithmMismatch(HmacError):
    """Raised when a key tagged for one algorithm is used with another."""

    def __init__(self, key_algorithm, requested):
        self.key_algorithm = key_algorithm
        self.requested = requested
        super().__init__(
            "key is for %s but %s was requested" % (key_algorithm, requested)
        )


class InvalidKey(HmacError, ValueError):
    pass
