"""A small streaming XML writer with indentation and a stack of open tags."""

from __future__ import annotations

import math
from typing import TextIO

MAX_LEVEL = 5
MAX_TAG_SIZE = 15

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ESCAPES = {
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}


def _escaped(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _format_int(value: int, base: int) -> str:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if base == 10:
        return str(value)
    if value < 0:
        # non-decimal output shows the 32-bit two's complement pattern
        value &= 0xFFFFFFFF
    chars = []
    while True:
        value, r = divmod(value, base)
        chars.append(_DIGITS[r])
        if not value:
            break
    return "".join(reversed(chars))


def _format_float(value: float, decimals: int) -> str:
    if decimals < 0:
        raise ValueError(f"decimals must not be negative, got {decimals}")
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    if abs(value) > 4294967040.0:
        return "ovf"
    prefix = ""
    if value < 0:
        prefix = "-"
        value = -value
    value += 0.5 / 10**decimals
    whole = int(value)
    rest = value - whole
    digits = []
    for _ in range(decimals):
        rest *= 10
        digit = int(rest)
        digits.append(str(digit))
        rest -= digit
    text = prefix + str(whole)
    if digits:
        text += "." + "".join(digits)
    return text


def _format_value(value: object, base: int, decimals: int) -> str:
    if isinstance(value, str):
        return _escaped(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return _format_int(value, base)
    if isinstance(value, float):
        return _format_float(value, decimals)
    raise TypeError(f"cannot write a value of type {type(value).__name__}")


class XMLWriter:
    """Writes XML to a text stream, remembering open tags to close them.

    At most five tags can be open at once; the closing tag repeats at most
    the first fifteen characters of the opening tag.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.reset()

    def reset(self) -> None:
        """Forget open tags and restore the default indent of two spaces."""
        self._indent = 0
        self._indent_step = 2
        self._stack: list[str] = []

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _spaces(self) -> None:
        self._write(" " * max(self._indent, 0))

    def header(self) -> None:
        """Write the standard XML declaration."""
        self._write('<?xml version="1.0" encoding="UTF-8"?>\n')

    def comment(self, text: str, multiline: bool = False) -> None:
        """Write <!-- text -->; a multiline comment is not indented."""
        self._write("\n")
        if not multiline:
            self._spaces()
        self._write("<!-- ")
        if multiline:
            self._write("\n")
        self._write(text)
        if multiline:
            self._write("\n")
        self._write(" -->\n")

    def tag_open(self, tag: str, name: str = "", newline: bool = True) -> None:
        """Write <tag> or <tag name="name"> and indent what follows."""
        if len(self._stack) >= MAX_LEVEL:
            raise OverflowError(f"XML nesting deeper than {MAX_LEVEL} levels")
        self._stack.append(tag[:MAX_TAG_SIZE])
        self.tag_start(tag)
        if name:
            self.tag_field("name", name)
        self.tag_end(newline, add_slash=False)
        self._indent += self._indent_step

    def tag_close(self, indent: bool = True) -> None:
        """Write the closing tag of the innermost open tag."""
        if not self._stack:
            raise IndexError("no open tag to close")
        self._indent -= self._indent_step
        if indent:
            self._spaces()
        self._write(f"</{self._stack.pop()}>\n")

    def tag_start(self, tag: str) -> None:
        """Write the indented start <tag of a tag, without closing it."""
        self._spaces()
        self._write(f"<{tag}")

    def tag_field(self, field: str, value: object, base: int = 10, decimals: int = 2) -> None:
        """Write an attribute field="value"; text is escaped."""
        self._write(f' {field}="{_format_value(value, base, decimals)}"')

    def tag_end(self, newline: bool = True, add_slash: bool = True) -> None:
        """Finish a tag with > or />."""
        if add_slash:
            self._write("/")
        self._write(">")
        if newline:
            self._write("\n")

    def write_node(self, tag: str, value: object, base: int = 10, decimals: int = 2) -> None:
        """Write <tag>value</tag> on one line."""
        text = _format_value(value, base, decimals)
        self.tag_open(tag, "", newline=False)
        self._write(text)
        self.tag_close(indent=False)

    def set_indent_size(self, size: int) -> None:
        """Set the number of spaces per nesting level."""
        if size < 0:
            raise ValueError(f"indent size must not be negative, got {size}")
        self._indent_step = size

    def escape(self, text: str) -> None:
        """Write text with the five special XML characters replaced by entities."""
        self._write(_escaped(text))