"""Exceptions raised by the curve generator."""

from __future__ import annotations


class HilbertError(ValueError):
    """Base class for invalid curve generation requests."""


class InvalidOrderError(HilbertError):
    """Raised when the curve order is smaller than one."""

    def __init__(self, order: int) -> None:
        super().__init__(f"order must be >= 1, got {order}")
        self.order = order


class IndexOutOfRangeError(HilbertError):
    """Raised when a curve index falls outside ``[0, 4**order - 1]``."""

    def __init__(self, index: int, order: int) -> None:
        super().__init__(
            f"index {index} out of range for order {order} "
            f"(expected 0 <= index < {4 ** order})"
        )
        self.index = index
        self.order = order


__all__ = ["HilbertError", "InvalidOrderError", "IndexOutOfRangeError"]
