"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-playground"
PACKAGE_NAME_SHORT = "playground"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Design pattern demonstrations built around a toy maze domain"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
