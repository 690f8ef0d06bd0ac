"""Exceptions raised while configuring or generating a ship."""


class ShipGenerationError(ValueError):
    """Base class for every error raised by the generator."""


class ConfigurationError(ShipGenerationError):
    """Unknown settings option, or a bound outside its allowed domain."""


class RangeError(ShipGenerationError):
    """Random source queried with an upper bound below the lower bound."""


class GeometryDegenerateError(ShipGenerationError):
    """Hull input has fewer than three distinct, non-collinear points."""
