"""
Huelab Color Engine Errors

Local, recoverable error types raised by the color engine. Channel math clamps
silently; only malformed input, out-of-bounds numeric input and unknown kind
names are rejected.
"""


class ColorEngineError(ValueError):
    """Base class for all color engine input errors."""

    code = "color_engine_error"

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.message = message
        self.value = value

    def to_dict(self):
        """Serialize error for API responses."""
        return {"code": self.code, "detail": self.message}


class InvalidFormat(ColorEngineError):
    """Malformed textual color input (hex or HSL text)."""

    code = "invalid_format"


class OutOfRange(ColorEngineError):
    """Numeric input outside its documented bounds."""

    code = "out_of_range"


class UnsupportedKind(ColorEngineError):
    """Unknown harmony, scheme, mode or color-blindness type name."""

    code = "unsupported_kind"
