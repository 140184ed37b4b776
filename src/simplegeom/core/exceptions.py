"""
Exceptions raised by the geometry kernel.
"""


class InvalidGeometryException(ValueError):
    """Raised when a geometry cannot be constructed from the given input."""
