"""Exception types raised by eorjax.

Only the geodetic conversions can fail.  Every other routine is total over
finite inputs and resolves degenerate geometry (poles, null vectors) with a
fixed convention instead of an error.
"""

from __future__ import annotations


class EarthOrientationError(ValueError):
    """Base class for errors raised by eorjax routines."""


class InvalidValueError(EarthOrientationError):
    """A named argument lies outside its mathematically required domain.

    Attributes:
        function: Name of the routine that rejected the argument.
        value: Name of the rejected argument.
    """

    def __init__(self, function: str, value: str) -> None:
        self.function = function
        self.value = value
        super().__init__(f"Function {function} indicated that value '{value}' is invalid")


class UnrealisticError(EarthOrientationError):
    """Inputs are individually well formed but jointly non-physical.

    Attributes:
        function: Name of the routine that rejected the inputs.
    """

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"Function {function} indicated that it received unrealistic inputs")
