import logging
from typing import Iterable, Iterator, List, Optional

from .arguments import Argument, Attribute, Flag, Operand
from .errors import EmptyAttributeError, EmptyFlagError

logger = logging.getLogger(__name__)


class CharCursor:
    """
    Characters of one raw token with one character of lookahead.
    current() is None once the token is exhausted.
    """

    def __init__(self, token: str):
        self.token = token
        self.chars: Iterator[str] = iter(token)
        self.pos = 0
        self.c: Optional[str] = next(self.chars, None)

    def current(self) -> Optional[str]:
        return self.c

    def advance(self) -> None:
        if self.c is not None:
            self.pos += 1
        self.c = next(self.chars, None)


def parse_arguments(args: Iterable[str]) -> List[Argument]:
    """
    Classify raw command line tokens into operands, flags and attributes.

    The first token is usually the program name; it is classified like any
    other token. A bare "-", "--" or "+" stops classification and every
    token after it is passed through as an Operand.

    Raises EmptyAttributeError / EmptyFlagError on the first malformed token.
    """
    arguments: List[Argument] = []
    it = iter(args)

    for arg in it:
        logger.debug("classifying %r", arg)
        cur = CharCursor(arg)
        c = cur.current()

        if c is None:
            arguments.append(Operand(""))
            continue

        if c == "-":
            cur.advance()
            d = cur.current()
            if d is None:
                break
            if d == "-":
                cur.advance()
                if cur.current() is None:
                    break
                parse_option(arguments, cur)
            else:
                parse_short_options(arguments, cur)
            continue

        if c == "+":
            cur.advance()
            if cur.current() is None:
                break
            parse_option(arguments, cur)
            continue

        parse_argument(arguments, cur)
    else:
        return arguments

    # terminator: the rest goes through untouched
    rest = [Operand(arg) for arg in it]
    logger.debug("terminator reached, passing %d token(s) through", len(rest))
    arguments.extend(rest)
    return arguments


def parse_short_options(arguments: List[Argument], cur: CharCursor) -> None:
    """-abc => a, b, c flags; -ab=val => flag a, attribute b."""
    while cur.current() is not None:
        c = cur.current()
        cur.advance()

        if c == "=":
            raise EmptyAttributeError(cur.token, cur.pos - 1)

        if cur.current() == "=":
            cur.advance()
            parse_attribute_value(arguments, cur, c)
            return

        arguments.append(Flag(c))


def parse_option(arguments: List[Argument], cur: CharCursor) -> None:
    """Long option: a flag, an attribute, or flags chained with '+'."""
    parse_name(arguments, cur, Flag)


def parse_argument(arguments: List[Argument], cur: CharCursor) -> None:
    """Bare token: an operand, unless it holds '+' or '='."""
    if cur.current() is None:
        arguments.append(Operand(""))
        return
    parse_name(arguments, cur, Operand)


def parse_name(arguments: List[Argument], cur: CharCursor, terminal) -> None:
    """
    Collect a name up to '+', '=' or the end of the token.

    terminal is the variant emitted when the token ends on the name:
    Flag for options, Operand for bare tokens. A '+' always emits a Flag
    and continues with another option on the remainder.
    """
    while True:
        c = cur.current()
        if c is None or c == "+":
            raise EmptyFlagError(cur.token, cur.pos)
        if c == "=":
            raise EmptyAttributeError(cur.token, cur.pos)

        name = [c]
        cur.advance()
        c = cur.current()
        while c is not None and c not in "+=":
            name.append(c)
            cur.advance()
            c = cur.current()

        if c is None:
            arguments.append(terminal("".join(name)))
            return

        cur.advance()
        if c == "=":
            parse_attribute_value(arguments, cur, "".join(name))
            return

        # '+' chains another option onto the same token
        arguments.append(Flag("".join(name)))
        terminal = Flag


def parse_attribute_value(arguments: List[Argument], cur: CharCursor, name: str) -> None:
    value = []
    while cur.current() is not None:
        value.append(cur.current())
        cur.advance()
    arguments.append(Attribute(name, "".join(value)))
