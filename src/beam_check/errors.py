"""Exceptions raised by the beam check engine.

All failures are synchronous and terminal for the calculation that raised
them; no partial results are returned.
"""


class BeamCheckError(Exception):
    """Base class for every error raised by ``beam_check``."""


class SectionNotFoundError(BeamCheckError, LookupError):
    """Beam category or size label does not resolve in the section table."""

    def __init__(self, category: str, size: str = None, message: str = None):
        self.category = category
        self.size = size
        if message is None:
            if size is None:
                message = f"Unknown beam category: {category}"
            else:
                message = f"Invalid beam type or size: {category}, {size}"
        super().__init__(message)


class InvalidUnitError(BeamCheckError, ValueError):
    """A unit value that the converter does not recognise."""

    def __init__(self, quantity: str, unit, allowed):
        self.quantity = quantity
        self.unit = unit
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {quantity} unit: {unit!r} "
            f"(expected one of {', '.join(self.allowed)})"
        )


class InvalidInputError(BeamCheckError, ValueError):
    """Numeric input or section data outside its valid range."""


class ConfigurationError(BeamCheckError):
    """A configuration or section table file could not be used."""
