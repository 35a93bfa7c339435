"""Gentoo LICENSE expression tokenizer, parser and evaluator.

Gentoo writes package licenses as whitespace separated expressions::

    GPL-2+ || ( MIT BSD ) doc? ( FDL-1.3 ) !bindist? ( all-rights-reserved )

* a bare identifier is free when it belongs to the free identifier set;
* ``( ... )`` requires every member to be free;
* ``|| ( ... )`` requires at least one member to be free;
* ``flag? ( ... )`` / ``!flag? ( ... )`` applies a group under a USE flag.
  The flag is always assumed to be active, so the group is always evaluated.

Tokenizing, parsing and evaluating are separate stages so each one can be
tested on its own.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, List, Tuple, Union


class TokenType(Enum):
    """Kinds of token in a Gentoo LICENSE expression."""
    IDENTIFIER = "identifier"
    PARAM = "param"
    OPEN = "open"
    CLOSE = "close"
    OR = "or"


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str


class LicenseSyntaxError(ValueError):
    """Raised by the parser for a malformed LICENSE expression."""


# Order matters: a USE flag token must win over a bare identifier.
_TOKEN_PATTERNS: Tuple[Tuple[TokenType, "re.Pattern[str]"], ...] = (
    (TokenType.PARAM, re.compile(r"!?[^\s()?|!]+\?")),
    (TokenType.OPEN, re.compile(r"\(")),
    (TokenType.CLOSE, re.compile(r"\)")),
    (TokenType.OR, re.compile(r"\|\|")),
    (TokenType.IDENTIFIER, re.compile(r"[^\s()]+")),
)
_WHITESPACE = re.compile(r"\s*")


def tokenize_license(text: str) -> List[Token]:
    """Split a LICENSE expression into typed tokens."""
    tokens: List[Token] = []
    pos = 0
    length = len(text)
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos >= length:
            return tokens
        for token_type, pattern in _TOKEN_PATTERNS:
            match = pattern.match(text, pos)
            if match:
                tokens.append(Token(token_type, match.group(0)))
                pos = match.end()
                break


@dataclass(frozen=True)
class LicenseId:
    name: str


@dataclass(frozen=True)
class AllOf:
    members: Tuple["Node", ...]


@dataclass(frozen=True)
class AnyOf:
    members: Tuple["Node", ...]


@dataclass(frozen=True)
class Conditional:
    flag: str
    negated: bool
    body: AllOf


Node = Union[LicenseId, AllOf, AnyOf, Conditional]


class _Parser:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._pos = 0

    def _peek(self):
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise LicenseSyntaxError("unexpected end of expression")
        self._pos += 1
        return token

    def parse(self) -> AllOf:
        members = self._sequence()
        token = self._peek()
        if token is not None:
            raise LicenseSyntaxError(f"unexpected '{token.text}'")
        return AllOf(tuple(members))

    def _sequence(self) -> List[Node]:
        members: List[Node] = []
        while True:
            token = self._peek()
            if token is None or token.type is TokenType.CLOSE:
                return members
            members.append(self._item())

    def _group(self) -> Tuple[Node, ...]:
        opener = self._next()
        if opener.type is not TokenType.OPEN:
            raise LicenseSyntaxError(f"expected '(' but got '{opener.text}'")
        members = self._sequence()
        closer = self._next()
        if closer.type is not TokenType.CLOSE:
            raise LicenseSyntaxError(f"expected ')' but got '{closer.text}'")
        return tuple(members)

    def _item(self) -> Node:
        token = self._peek()
        if token.type is TokenType.PARAM:
            self._pos += 1
            negated = token.text.startswith("!")
            flag = token.text.lstrip("!").rstrip("?")
            return Conditional(flag=flag, negated=negated, body=AllOf(self._group()))
        if token.type is TokenType.OR:
            self._pos += 1
            return AnyOf(self._group())
        if token.type is TokenType.OPEN:
            return AllOf(self._group())
        self._pos += 1
        return LicenseId(token.text)


def parse_license(tokens: List[Token]) -> AllOf:
    """Parse a token list into an expression tree.

    Raises:
        LicenseSyntaxError: on unbalanced parentheses or a dangling ``||`` or
            USE flag.
    """
    return _Parser(tokens).parse()


def evaluate(node: Node, free_ids: AbstractSet[str]) -> bool:
    """Evaluate an expression tree against lower-cased free identifiers."""
    if isinstance(node, LicenseId):
        return node.name.lower() in free_ids
    if isinstance(node, AllOf):
        return all(evaluate(member, free_ids) for member in node.members)
    if isinstance(node, AnyOf):
        return any(evaluate(member, free_ids) for member in node.members)
    if isinstance(node, Conditional):
        return evaluate(node.body, free_ids)
    raise TypeError(f"not a license expression node: {node!r}")


def is_free_gentoo_license(text: str, free_ids: AbstractSet[str]) -> bool:
    """True when the LICENSE expression ``text`` only admits free licenses.

    Empty expressions and expressions that fail to parse are not free.
    """
    if not text or not text.strip():
        return False
    try:
        tree = parse_license(tokenize_license(text))
    except LicenseSyntaxError:
        return False
    return evaluate(tree, free_ids)
