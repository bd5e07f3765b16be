"""Pattern Catalog - Root Package.

A catalog of the classic object-oriented design patterns. Every pattern
lives in its own module together with a short demo that prints an
illustrative narration of the pattern at work.

Key Components:
    - patterns: One module per pattern, grouped by category
    - domain: Catalog metadata and the exception hierarchy
    - application: Catalog service that lists patterns and runs demos
    - infrastructure: Pattern registry and logging
    - config: Configuration schemas, loading and management
    - cli: Command line interface

Usage:
    >>> pattern-catalog patterns list
    >>> pattern-catalog patterns run singleton
    >>> pattern-catalog patterns run --all --category behavioral
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Pattern Catalog Maintainers"
__package_name__ = PACKAGE_NAME
