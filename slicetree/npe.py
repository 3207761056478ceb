"""
Validation of Normalized Polish Expressions.

An NPE is a postfix encoding of a slicing tree over the alphabet {operand names} + {'V', 'H'}. It is valid when, read
left to right, every prefix holds more operands than operators (balloting property), no operator is immediately
repeated, every operand appears once, and the whole expression holds exactly one more operand than operators.
"""

from typing import NamedTuple, Optional

VERTICAL = 'V'
HORIZONTAL = 'H'
OPERATORS = frozenset((VERTICAL, HORIZONTAL))


def is_operator(symbol: str) -> bool:
    return symbol in OPERATORS


class NpeCheck(NamedTuple):
    """Outcome of validate_npe. Truthy iff the expression is valid."""
    valid: bool
    reason: str = ''
    position: Optional[int] = None

    def __bool__(self):
        return self.valid


def validate_npe(npe: str) -> NpeCheck:
    """
    Scan the expression once, left to right, and report the first rule it breaks.
    :param npe: Candidate expression
    :return: NpeCheck with the reason and position of the first violation, if any.
    """
    if not npe:
        return NpeCheck(False, 'empty expression')
    operands = 0
    operators = 0
    for i, symbol in enumerate(npe):
        if is_operator(symbol):
            if i + 1 < len(npe) and npe[i + 1] == symbol:
                return NpeCheck(False, f"operator {symbol!r} repeated", i)
            operators += 1
        else:
            if npe.find(symbol, i + 1) != -1:
                return NpeCheck(False, f"operand {symbol!r} repeated", i)
            operands += 1
        if operands <= operators:
            return NpeCheck(False, 'balloting property violated', i)
    if operators != operands - 1:
        return NpeCheck(False, f"{operands} operands need {operands - 1} operators, found {operators}")
    return NpeCheck(True)


def is_valid_npe(npe: str) -> bool:
    return bool(validate_npe(npe))
