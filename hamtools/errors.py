"""Error types raised by the geo, locator and display helpers.

All of them subclass ValueError so existing ``except ValueError`` handlers
keep working.
"""


class CoordinateRangeError(ValueError):
    """Latitude/longitude outside its valid domain (or not finite)."""


class LocatorFormatError(ValueError):
    """String is not a 6-character Maidenhead locator."""


class CoordinateParseError(ValueError):
    """User-supplied text could not be parsed as a number."""
