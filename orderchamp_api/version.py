"""Library identity advertised in the User-Agent header."""

VERSION = "1.0.0"
LIBRARY_NAME = "OrderchampApi"

__all__ = ["LIBRARY_NAME", "VERSION"]
