"""
gasunit.version — semantic version string.

Tiny and dependency-free so it can be imported very early, including in
packaging or frozen environments.
"""

# Bump this when making a tagged release. Use semver (major.minor.patch).
__version__ = "0.1.0"

__all__ = ["__version__"]
