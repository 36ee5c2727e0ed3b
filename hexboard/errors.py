"""Exceptions raised by hexboard."""


class HexboardError(Exception):
    """Base class for hexboard errors."""


class InvalidConfigError(HexboardError, ValueError):
    """Grid or chunk configuration that cannot produce geometry."""


class MalformedMapDataError(HexboardError, ValueError):
    """Map payload that does not match the map file schema."""
