"""Exceptions raised by the path metadata layer."""

from __future__ import annotations

from collections.abc import Iterable


class InvalidMetadataError(ValueError):
    """Raised when path metadata does not fit the profile of its sense.

    The individual rule violations are kept on ``violations``.
    """

    def __init__(self, violations: Iterable[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations) or "invalid path metadata")
