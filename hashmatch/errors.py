"""Exception types raised by hash comparison and record decoding."""

from __future__ import annotations


class HashMatchError(RuntimeError):
    pass


class IncompatibleAlgorithmError(HashMatchError, ValueError):
    """Raised when two hashes produced by different algorithms are compared."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "Can't compare two hash values created by different algorithms "
            f"(algoId {expected} vs {actual})"
        )


class HashRecordError(HashMatchError, ValueError):
    pass
