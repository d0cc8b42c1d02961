"""mapbind error types."""


class KeyNotFound(KeyError):
    """Raised when a subscript read or delete names an absent key.

    Subclasses ``KeyError`` so callers can keep using the usual
    ``except KeyError`` idiom. The missing key is ``args[0]``.
    """

    @property
    def key(self):
        return self.args[0] if self.args else None


class BindError(TypeError):
    """Raised when ``bind_map`` is handed something it cannot bind."""
