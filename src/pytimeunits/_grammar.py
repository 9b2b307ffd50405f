"""Lark grammar for the compact ``NdNhNmNs`` duration text form."""

from __future__ import annotations

from lark import Lark, Token
from lark.visitors import Transformer

# Units are optional but ordered, and each may appear at most once.
# No %ignore: whitespace and any other character is a syntax error.
DURATION_GRAMMAR = r"""
start: days? hours? minutes? seconds?

days: DIGITS "d"
hours: DIGITS "h"
minutes: DIGITS "m"
seconds: DIGITS "s"

DIGITS: /[0-9]+/
"""


class _UnitCollector(Transformer):
    """Collect each unit's digit string, keyed by Duration field name."""

    def start(self, items: list[tuple[str, str]]) -> dict[str, str]:
        return dict(items)

    def days(self, items: list[Token]) -> tuple[str, str]:
        return "days", str(items[0])

    def hours(self, items: list[Token]) -> tuple[str, str]:
        return "hours", str(items[0])

    def minutes(self, items: list[Token]) -> tuple[str, str]:
        return "minutes", str(items[0])

    def seconds(self, items: list[Token]) -> tuple[str, str]:
        return "seconds", str(items[0])


_parser = Lark(DURATION_GRAMMAR, parser="lalr", transformer=_UnitCollector())


def scan(text: str) -> dict[str, str]:
    """Match text against the duration grammar.

    Returns a mapping of field name to the digit string attached to that
    unit; absent units are omitted.

    Raises:
        lark.exceptions.UnexpectedInput: If text does not match the grammar.
    """
    return _parser.parse(text)
