"""Error types.

Every rejected input surfaces as `InvalidArgumentError`. It subclasses
`ValueError` so callers that already catch `ValueError` keep working.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An argument is absent, of the wrong type, or outside its domain."""
