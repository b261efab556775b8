"""Query path compilation and evaluation.

Supports a JSONPath-like subset:
    $                 - document root (optional prefix)
    name, .name       - member access
    ['name']          - quoted member access, any characters
    [0], [-1]         - sequence index, negative counts from the end
    [*], .*           - every member value or element
    ..name            - recursive descent

Filter expressions, slices and unions are rejected.
"""
import string
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterator, List, Optional, Tuple, Union

from json_field_mapper.models.errors import InvalidQueryPath
from json_field_mapper.models.values import NOT_FOUND

ROOT = "$"
_NAME_TERMINATORS = ".["


@dataclass(frozen=True)
class Member:
    name: str


@dataclass(frozen=True)
class Index:
    position: int


@dataclass(frozen=True)
class Wildcard:
    pass


@dataclass(frozen=True)
class Descend:
    pass


Step = Union[Member, Index, Wildcard, Descend]


@dataclass(frozen=True)
class QueryPath:
    """A compiled query path."""

    text: str
    steps: Tuple[Step, ...]

    def find(self, document: Any) -> Iterator[Any]:
        """Yield every node matched by the path, in document order."""
        nodes: Iterator[Any] = iter((document,))
        for step in self.steps:
            nodes = _apply_step(step, nodes)
        return nodes

    def first(self, document: Any) -> Any:
        """Return the first matched node or NOT_FOUND."""
        return next(self.find(document), NOT_FOUND)


@lru_cache(maxsize=256)
def compile_query(path: str) -> QueryPath:
    """Compile path text into a QueryPath.

    Raises:
        InvalidQueryPath: if the text is not a supported query path
    """
    return QueryPath(text=path, steps=tuple(_Tokenizer(path).tokenize()))


def select(document: Any, path: str) -> Any:
    """Return the first node matched by path, or NOT_FOUND."""
    return compile_query(path).first(document)


class _Tokenizer:
    """Turn query path text into steps."""

    def __init__(self, path: str):
        self.path = path
        self.pos = 0

    def error(self, reason: str, position: Optional[int] = None) -> InvalidQueryPath:
        return InvalidQueryPath(self.path, self.pos if position is None else position, reason)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.path[index] if index < len(self.path) else ""

    def tokenize(self) -> List[Step]:
        steps: List[Step] = []
        path = self.path

        if path.startswith(ROOT):
            self.pos = 1
            if self.peek() not in ("", ".", "["):
                raise self.error("expected '.' or '[' after '$'")
        elif path and path[0] not in _NAME_TERMINATORS:
            steps.append(Member(self.read_name()))

        while self.pos < len(path):
            char = self.peek()
            if char == ".":
                if self.peek(1) == ".":
                    self.pos += 2
                    steps.append(Descend())
                    if self.peek() == "[":
                        continue
                else:
                    self.pos += 1
                steps.append(self.read_dotted())
            elif char == "[":
                steps.append(self.read_bracket())
            else:
                raise self.error(f"unexpected character {char!r}")

        return steps

    def read_dotted(self) -> Step:
        if self.peek() == "*":
            self.pos += 1
            return Wildcard()
        return Member(self.read_name())

    def read_name(self) -> str:
        start = self.pos
        while self.pos < len(self.path) and self.path[self.pos] not in _NAME_TERMINATORS:
            self.pos += 1
        name = self.path[start:self.pos]
        if not name:
            raise self.error("expected a member name", start)
        return name

    def read_bracket(self) -> Step:
        start = self.pos
        self.pos += 1
        self.skip_spaces()

        char = self.peek()
        if char in ("'", '"'):
            step: Step = Member(self.read_quoted(char))
        elif char == "*":
            self.pos += 1
            step = Wildcard()
        elif char == "?" or char == "(":
            raise self.error("filter and script expressions are not supported")
        else:
            step = Index(self.read_integer())

        self.skip_spaces()
        if self.peek() != "]":
            if self.peek() in (",", ":"):
                raise self.error("unions and slices are not supported")
            raise self.error("unterminated '['", start)
        self.pos += 1
        return step

    def read_quoted(self, quote: str) -> str:
        start = self.pos
        self.pos += 1
        chars = []
        while True:
            char = self.peek()
            if char == "":
                raise self.error("unterminated quoted name", start)
            self.pos += 1
            if char == quote:
                return "".join(chars)
            if char == "\\":
                escaped = self.peek()
                if escaped == "":
                    raise self.error("dangling escape", start)
                chars.append(escaped)
                self.pos += 1
            else:
                chars.append(char)

    def read_integer(self) -> int:
        start = self.pos
        if self.peek() == "-":
            self.pos += 1
        while self.peek() and self.peek() in string.digits:
            self.pos += 1
        text = self.path[start:self.pos]
        if text in ("", "-"):
            raise self.error("expected an index, '*' or a quoted name", start)
        return int(text)

    def skip_spaces(self) -> None:
        while self.peek() == " ":
            self.pos += 1


def _apply_step(step: Step, nodes: Iterator[Any]) -> Iterator[Any]:
    for node in nodes:
        if isinstance(step, Member):
            if isinstance(node, dict) and step.name in node:
                yield node[step.name]
        elif isinstance(step, Index):
            if isinstance(node, list) and -len(node) <= step.position < len(node):
                yield node[step.position]
        elif isinstance(step, Wildcard):
            yield from _children(node)
        else:
            yield from _walk(node)


def _children(node: Any) -> Iterator[Any]:
    if isinstance(node, dict):
        yield from node.values()
    elif isinstance(node, list):
        yield from node


def _walk(node: Any) -> Iterator[Any]:
    yield node
    for child in _children(node):
        yield from _walk(child)
