"""Parsing state and combinators for the ISO 8601 grammar.

A Parser walks a string one character at a time. Grammar rules are plain
functions taking the Parser and returning a value; they report failure by
calling Parser.fail, which raises ParseError with a single DeadEnd
recording the current offset, the problem and the open contexts.

Alternatives are tried in order by Parser.one_of. An alternative that
fails without consuming input lets the next one run; an alternative that
fails after consuming input is committed and its error propagates as-is.

This module is not part of the public API.
"""

from __future__ import annotations

import contextlib
from typing import Callable, Iterator, NoReturn, TypeVar

from isochron.errors import ParseError
from isochron.problems import DeadEnd, ExpectingEnd, Problem

T = TypeVar("T")

Rule = Callable[["Parser"], T]


def is_ascii_digit(char: str) -> bool:
    """Return True for '0' through '9' only."""
    return "0" <= char <= "9"


def succeed(value: T) -> Rule[T]:
    """Return a rule that consumes nothing and yields value."""

    def rule(p: Parser) -> T:
        return value

    return rule


class Parser:
    """Mutable cursor over one input string.

    A Parser is created per call and never shared, so grammar rules may
    freely advance it.

    Attributes:
        source: The full input text.
        offset: Index of the next character to read.

    Examples:
        >>> p = Parser("12:30")
        >>> p.chomp_while(is_ascii_digit)
        '12'
        >>> p.optional(":")
        True
        >>> p.offset
        3
    """

    __slots__ = ("source", "offset", "_context")

    def __init__(self, source: str) -> None:
        self.source: str = source
        self.offset: int = 0
        self._context: list[str] = []

    @property
    def context_stack(self) -> tuple[str, ...]:
        """Return the open contexts, outermost first."""
        return tuple(self._context)

    @property
    def at_end(self) -> bool:
        """Return True when every character has been consumed."""
        return self.offset >= len(self.source)

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self.at_end:
            return None
        return self.source[self.offset]

    def fail(self, problem: Problem) -> NoReturn:
        """Stop parsing with problem at the current offset."""
        raise ParseError([DeadEnd(self.offset, problem, self.context_stack)])

    def chomp_if(self, predicate: Callable[[str], bool], problem: Problem) -> str:
        """Consume one character matching predicate, or fail with problem."""
        char = self.peek()
        if char is None or not predicate(char):
            self.fail(problem)
        self.offset += 1
        return char

    def chomp_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while predicate holds and return them."""
        start = self.offset
        end = len(self.source)
        while self.offset < end and predicate(self.source[self.offset]):
            self.offset += 1
        return self.source[start : self.offset]

    def symbol(self, text: str, problem: Problem) -> None:
        """Consume text exactly, or fail with problem without consuming."""
        if not self.source.startswith(text, self.offset):
            self.fail(problem)
        self.offset += len(text)

    def optional(self, text: str) -> bool:
        """Consume text if it comes next and report whether it did."""
        if self.source.startswith(text, self.offset):
            self.offset += len(text)
            return True
        return False

    @contextlib.contextmanager
    def in_context(self, name: str) -> Iterator[None]:
        """Label failures raised inside the block with name."""
        self._context.append(name)
        try:
            yield
        finally:
            self._context.pop()

    def one_of(self, *rules: Rule[T]) -> T:
        """Return the result of the first rule that succeeds.

        Raises:
            ParseError: With the first committed failure, or with the dead
                ends of every rule in order when none consumed input.
        """
        if not rules:
            raise ValueError("one_of requires at least one rule")

        start = self.offset
        dead_ends: list[DeadEnd] = []
        for rule in rules:
            try:
                return rule(self)
            except ParseError as error:
                if self.offset != start:
                    raise
                dead_ends.extend(error.dead_ends)
        raise ParseError(dead_ends)

    def run(self, rule: Rule[T]) -> T:
        """Apply rule to the whole input, failing on leftover characters."""
        value = rule(self)
        if not self.at_end:
            self.fail(ExpectingEnd())
        return value


__all__ = [
    "Parser",
    "Rule",
    "is_ascii_digit",
    "succeed",
]
