"""Reader for scene files in the libconfig text format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .errors import RaytracerError


class ConfigError(RaytracerError):
    """A scene file could not be read, parsed, or did not hold a setting."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.filename = filename

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        where = f"{self.filename}:{self.line}" if self.filename else f"line {self.line}"
        return f"Parse error at {where} - {self.message}"


_TOKEN_RE = re.compile(
    r"""
      (?P<ws>[ \t\r\f\v\n]+)
    | (?P<comment>\#[^\n]*|//[^\n]*)
    | (?P<block>/\*.*?\*/)
    | (?P<string>"(?:[^"\\\n]|\\.)*")
    | (?P<float>[-+]?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?\d+[eE][-+]?\d+)
    | (?P<hex>0[xX][0-9A-Fa-f]+L{0,2})
    | (?P<int>[-+]?\d+L{0,2})
    | (?P<bool>(?i:true|false)(?![-A-Za-z0-9_*]))
    | (?P<name>[A-Za-z*][-A-Za-z0-9_*]*)
    | (?P<punct>[=:;,{}\[\]()])
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|.)")
_SIMPLE_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t", "f": "\f"}
_SKIPPED = frozenset({"ws", "comment", "block"})
_SCALARS = frozenset({"string", "float", "int", "bool"})
_PATH_SEGMENT_RE = re.compile(r"\[(\d+)\]|([A-Za-z*][-A-Za-z0-9_*]*)")


@dataclass(frozen=True, slots=True)
class _Token:
    kind: str
    value: Any
    line: int


def _unescape(body: str, line: int, filename: Optional[str]) -> str:
    def replace(match: re.Match) -> str:
        code = match.group(1)
        if code[0] == "x" and len(code) == 3:
            return chr(int(code[1:], 16))
        if code in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[code]
        raise ConfigError(f"invalid escape sequence \\{code}", line, filename)

    return _ESCAPE_RE.sub(replace, body)


def _tokenize(text: str, filename: Optional[str]) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    line = 1
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ConfigError(f"syntax error near {text[pos]!r}", line, filename)
        kind = match.lastgroup
        raw = match.group()
        if kind == "punct":
            tokens.append(_Token(raw, raw, line))
        elif kind == "string":
            tokens.append(_Token("string", _unescape(raw[1:-1], line, filename), line))
        elif kind == "float":
            tokens.append(_Token("float", float(raw), line))
        elif kind == "hex":
            tokens.append(_Token("int", int(raw.rstrip("L"), 16), line))
        elif kind == "int":
            tokens.append(_Token("int", int(raw.rstrip("L")), line))
        elif kind == "bool":
            tokens.append(_Token("bool", raw.lower() == "true", line))
        elif kind == "name":
            tokens.append(_Token("name", raw, line))
        elif kind not in _SKIPPED:
            raise ConfigError(f"syntax error near {raw!r}", line, filename)
        line += raw.count("\n")
        pos = match.end()
    tokens.append(_Token("eof", None, line))
    return tokens


def _describe(kind: str) -> str:
    if kind == "eof":
        return "end of file"
    if kind == "name":
        return "setting name"
    return f"'{kind}'"


def _describe_token(tok: _Token) -> str:
    if tok.kind in _SCALARS or tok.kind == "name":
        return f"{tok.kind} {tok.value!r}"
    return _describe(tok.kind)


class _Parser:
    def __init__(self, tokens: list[_Token], filename: Optional[str]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._filename = filename

    def parse(self) -> dict[str, Any]:
        return self._settings("eof")

    def _peek(self) -> _Token:
        return self._tokens[self._pos]

    def _advance(self) -> _Token:
        tok = self._tokens[self._pos]
        if tok.kind != "eof":
            self._pos += 1
        return tok

    def _error(self, message: str, tok: Optional[_Token] = None) -> ConfigError:
        tok = tok or self._peek()
        return ConfigError(message, tok.line, self._filename)

    def _expect(self, kind: str) -> _Token:
        tok = self._peek()
        if tok.kind != kind:
            raise self._error(f"expected {_describe(kind)}, found {_describe_token(tok)}")
        return self._advance()

    def _settings(self, closing: str) -> dict[str, Any]:
        group: dict[str, Any] = {}
        while self._peek().kind != closing:
            name_tok = self._expect("name")
            if self._peek().kind not in ("=", ":"):
                raise self._error(f"expected '=' or ':', found {_describe_token(self._peek())}")
            self._advance()
            value = self._value()
            if name_tok.value in group:
                raise self._error(f"duplicate setting name {name_tok.value!r}", name_tok)
            group[name_tok.value] = value
            if self._peek().kind in (";", ","):
                self._advance()
        return group

    def _value(self) -> Any:
        tok = self._peek()
        if tok.kind in _SCALARS:
            return self._scalar()
        if tok.kind == "{":
            self._advance()
            group = self._settings("}")
            self._expect("}")
            return group
        if tok.kind == "[":
            return self._array()
        if tok.kind == "(":
            return self._list()
        raise self._error(f"expected a value, found {_describe_token(tok)}")

    def _scalar(self) -> Any:
        tok = self._advance()
        if tok.kind != "string":
            return tok.value
        parts = [tok.value]
        while self._peek().kind == "string":
            parts.append(self._advance().value)
        return "".join(parts)

    def _sequence(self, closing: str, read_item) -> list[Any]:
        self._advance()
        items: list[Any] = []
        while self._peek().kind != closing:
            items.append(read_item())
            if self._peek().kind == ",":
                self._advance()
            elif self._peek().kind != closing:
                raise self._error(
                    f"expected ',' or '{closing}', found {_describe_token(self._peek())}"
                )
        self._expect(closing)
        return items

    def _array(self) -> list[Any]:
        start = self._peek()

        def read_scalar() -> Any:
            if self._peek().kind not in _SCALARS:
                raise self._error("arrays may hold only scalar values")
            return self._scalar()

        items = self._sequence("]", read_scalar)
        if len({type(item) for item in items}) > 1:
            raise self._error("array elements must all have the same type", start)
        return items

    def _list(self) -> list[Any]:
        return self._sequence(")", self._value)


def _split_path(path: str) -> list[Union[str, int]]:
    parts: list[Union[str, int]] = []
    pos = 0
    while pos < len(path):
        if path[pos] in ".:/":
            pos += 1
            continue
        match = _PATH_SEGMENT_RE.match(path, pos)
        if match is None:
            raise ConfigError(f"invalid setting path: {path}")
        index, name = match.groups()
        parts.append(int(index) if index is not None else name)
        pos = match.end()
    return parts


def _matches_type(value: Any, default: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


class Config:
    """A parsed configuration: nested groups (dicts), lists and scalars."""

    def __init__(self, root: Optional[dict[str, Any]] = None, filename: Optional[str] = None) -> None:
        self.root: dict[str, Any] = root if root is not None else {}
        self.filename = filename

    def __repr__(self) -> str:
        return f"Config(filename={self.filename!r}, settings={list(self.root)!r})"

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            self.lookup(path)
        except ConfigError:
            return False
        return True

    def lookup(self, path: str) -> Any:
        """The setting at a path such as 'a.b.[0].c'; raises ConfigError if absent."""
        node: Any = self.root
        for part in _split_path(path):
            if isinstance(part, int):
                if not isinstance(node, list) or part >= len(node):
                    raise ConfigError(f"setting not found: {path}")
            elif not isinstance(node, dict) or part not in node:
                raise ConfigError(f"setting not found: {path}")
            node = node[part]
        return node

    def lookup_value(self, path: str, default: Any = None) -> Any:
        """The scalar at path, or default if it is absent or of another type.

        The type must match the default exactly: an integer setting is not
        read as a float, nor a float as an integer. A default of None
        accepts any scalar.
        """
        try:
            value = self.lookup(path)
        except ConfigError:
            return default
        if isinstance(value, (dict, list)):
            return default
        if default is None or _matches_type(value, default):
            return value
        return default


def _parse(text: str, filename: Optional[str]) -> Config:
    tokens = _tokenize(text, filename)
    return Config(_Parser(tokens, filename).parse(), filename)


def parse_config(text: str) -> Config:
    """Parse configuration text; raises ConfigError on a syntax error."""
    return _parse(text, None)


def load_config(path: Union[str, Path]) -> Config:
    """Read and parse a configuration file; raises ConfigError on failure."""
    if not str(path):
        raise ConfigError("No file to open")
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError("I/O error while reading file.") from exc
    return _parse(text, str(path))