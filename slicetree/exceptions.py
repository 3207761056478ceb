"""
Error kinds raised when an NPE cannot be evaluated against a cell library.
"""


class FloorplanError(Exception):
    """Base class for every failure of a single NPE evaluation."""


class InvalidExpressionError(FloorplanError, ValueError):
    """The expression is not a valid Normalized Polish Expression."""

    def __init__(self, npe: str, reason: str = 'invalid expression'):
        self.npe = npe
        self.reason = reason
        super().__init__(f'Invalid NPE {npe!r}: {reason}')


class CellNotFoundError(FloorplanError, LookupError):
    """An operand of the expression has no cell in the library."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Cell {name!r} not found in cell library')
