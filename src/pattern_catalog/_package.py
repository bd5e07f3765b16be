"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_SHORT = "patcat"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Classic object-oriented design patterns with narrated demos"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = PACKAGE_NAME_PYTHON.upper() + "_"
