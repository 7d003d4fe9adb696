"""Format-preserving edits of top-level properties in JSONC documents.

Only the top-level object is ever structurally parsed. Values are located by
scanning (strings, comments, and nesting are respected) and replaced as text,
so comments and formatting elsewhere in the document survive an upsert.
"""

import json
from dataclasses import dataclass
from typing import Any

_WHITESPACE = " \t\r\n"
_DEFAULT_INDENT = "  "


class JsoncSyntaxError(ValueError):
    """Raised when a document cannot be scanned as a JSONC object."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


@dataclass(frozen=True)
class _Member:
    key: str
    key_start: int
    value_start: int
    value_end: int


@dataclass(frozen=True)
class _TopLevelObject:
    open_brace: int
    close_brace: int
    members: tuple[_Member, ...]
    trailing_comma: int | None


def _skip_trivia(text: str, pos: int) -> int:
    """Skip whitespace and comments, returning the next significant offset."""
    length = len(text)
    while pos < length:
        char = text[pos]
        if char in _WHITESPACE:
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline + 1
        elif text.startswith("/*", pos):
            end = text.find("*/", pos + 2)
            if end == -1:
                raise JsoncSyntaxError("unterminated block comment", pos)
            pos = end + 2
        else:
            break
    return pos


def _scan_string(text: str, pos: int) -> int:
    """Scan a string starting at its opening quote; return offset after the closing quote."""
    length = len(text)
    i = pos + 1
    while i < length:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == '"':
            return i + 1
        i += 1
    raise JsoncSyntaxError("unterminated string", pos)


def _scan_value(text: str, pos: int) -> int:
    """Scan any JSONC value starting at pos; return its end offset (exclusive)."""
    length = len(text)
    if pos >= length:
        raise JsoncSyntaxError("expected value", pos)

    char = text[pos]
    if char == '"':
        return _scan_string(text, pos)

    if char in "{[":
        closers = {"{": "}", "[": "]"}
        stack = [closers[char]]
        i = pos + 1
        while stack:
            i = _skip_trivia(text, i)
            if i >= length:
                raise JsoncSyntaxError("unterminated container", pos)
            current = text[i]
            if current == '"':
                i = _scan_string(text, i)
            elif current in closers:
                stack.append(closers[current])
                i += 1
            elif current in "}]":
                if current != stack.pop():
                    raise JsoncSyntaxError("mismatched bracket", i)
                i += 1
            else:
                i += 1
        return i

    i = pos
    while i < length and text[i] not in ",}]" + _WHITESPACE and not text.startswith("/", i):
        i += 1
    if i == pos:
        raise JsoncSyntaxError(f"unexpected character {char!r}", pos)
    return i


def _parse_top_level(text: str) -> _TopLevelObject:
    length = len(text)
    pos = _skip_trivia(text, 0)
    if pos >= length or text[pos] != "{":
        raise JsoncSyntaxError("expected top-level object", pos)

    open_brace = pos
    members: list[_Member] = []
    trailing_comma: int | None = None
    pos = _skip_trivia(text, pos + 1)

    while True:
        if pos >= length:
            raise JsoncSyntaxError("unterminated top-level object", open_brace)
        if text[pos] == "}":
            close_brace = pos
            break
        if text[pos] != '"':
            raise JsoncSyntaxError("expected property name", pos)

        key_start = pos
        key_end = _scan_string(text, pos)
        key = json.loads(text[key_start:key_end])

        pos = _skip_trivia(text, key_end)
        if pos >= length or text[pos] != ":":
            raise JsoncSyntaxError("expected ':'", pos)

        value_start = _skip_trivia(text, pos + 1)
        value_end = _scan_value(text, value_start)
        members.append(_Member(key, key_start, value_start, value_end))
        trailing_comma = None

        pos = _skip_trivia(text, value_end)
        if pos < length and text[pos] == ",":
            trailing_comma = pos
            pos = _skip_trivia(text, pos + 1)
            continue
        if pos < length and text[pos] == "}":
            close_brace = pos
            break
        raise JsoncSyntaxError("expected ',' or '}'", pos)

    rest = _skip_trivia(text, close_brace + 1)
    if rest != length:
        raise JsoncSyntaxError("unexpected content after top-level object", rest)

    return _TopLevelObject(open_brace, close_brace, tuple(members), trailing_comma)


def _line_indent(text: str, offset: int) -> str:
    """Leading whitespace of the line containing offset."""
    line_start = text.rfind("\n", 0, offset) + 1
    i = line_start
    while i < offset and text[i] in " \t":
        i += 1
    return text[line_start:i]


def _member_indent(text: str, member: _Member) -> str | None:
    """Indent of a member's line, or None if the member shares a line with other content."""
    line_start = text.rfind("\n", 0, member.key_start) + 1
    prefix = text[line_start : member.key_start]
    if prefix.strip(" \t"):
        return None
    return prefix


def _serialize(value: Any, base_indent: str, unit: str) -> str:
    lines = json.dumps(value, indent=unit, ensure_ascii=False).split("\n")
    return "\n".join([lines[0], *(base_indent + line for line in lines[1:])])


def _end_of_line_if_trivia(text: str, pos: int) -> int:
    """Offset of the newline ending pos's line when only trivia follows pos, else pos."""
    newline = text.find("\n", pos)
    if newline == -1:
        return pos
    remainder = text[pos:newline].strip(" \t\r")
    if remainder == "" or remainder.startswith("//"):
        return newline
    return pos


def get_top_level_property_value_text(text: str, key: str) -> str | None:
    """Return the raw text of a top-level property's value.

    Args:
        text: JSONC document
        key: Top-level property name

    Returns:
        Value text exactly as written (comments inside it included), or None
        if the document is blank or has no such property. With duplicate keys
        the last occurrence wins, as in JSON.parse.

    Raises:
        JsoncSyntaxError: If the document is not a JSONC object
    """
    if not text.strip():
        return None

    found: _Member | None = None
    for member in _parse_top_level(text).members:
        if member.key == key:
            found = member
    if found is None:
        return None
    return text[found.value_start : found.value_end]


def upsert_top_level_property(text: str, key: str, value: Any) -> str:
    """Replace or insert a top-level property, preserving everything else.

    Args:
        text: JSONC document (blank text is treated as an empty object)
        key: Top-level property name
        value: JSON-serializable value

    Returns:
        Updated document text

    Raises:
        JsoncSyntaxError: If the document is not a JSONC object
    """
    if not text.strip():
        return json.dumps({key: value}, indent=2, ensure_ascii=False) + "\n"

    obj = _parse_top_level(text)
    brace_indent = _line_indent(text, obj.open_brace)

    indent: str | None = None
    for member in obj.members:
        indent = _member_indent(text, member)
        if indent is not None:
            break

    single_line = "\n" not in text[obj.open_brace : obj.close_brace]
    if indent is None:
        indent = brace_indent + _DEFAULT_INDENT
    unit = indent[len(brace_indent) :] if indent.startswith(brace_indent) else ""
    if not unit:
        unit = _DEFAULT_INDENT

    existing: _Member | None = None
    for member in obj.members:
        if member.key == key:
            existing = member

    if existing is not None:
        if single_line:
            value_text = json.dumps(value, ensure_ascii=False)
        else:
            own_indent = _member_indent(text, existing)
            value_text = _serialize(value, own_indent if own_indent is not None else indent, unit)
        return text[: existing.value_start] + value_text + text[existing.value_end :]

    key_text = json.dumps(key, ensure_ascii=False)

    if single_line:
        entry = f"{key_text}: {json.dumps(value, ensure_ascii=False)}"
        if not obj.members:
            return text[: obj.open_brace + 1] + entry + text[obj.close_brace :]
        anchor = obj.members[-1].value_end
        if obj.trailing_comma is not None:
            anchor = obj.trailing_comma + 1
            return text[:anchor] + " " + entry + "," + text[anchor:]
        return text[:anchor] + ", " + entry + text[anchor:]

    entry = f"{key_text}: {_serialize(value, indent, unit)}"

    if not obj.members:
        inner = text[obj.open_brace + 1 : obj.close_brace]
        if not inner.strip():
            return (
                text[: obj.open_brace + 1]
                + "\n"
                + indent
                + entry
                + "\n"
                + brace_indent
                + text[obj.close_brace :]
            )
        return text[: obj.open_brace + 1] + "\n" + indent + entry + text[obj.open_brace + 1 :]

    if obj.trailing_comma is not None:
        insert_at = _end_of_line_if_trivia(text, obj.trailing_comma + 1)
        return text[:insert_at] + "\n" + indent + entry + "," + text[insert_at:]

    value_end = obj.members[-1].value_end
    insert_at = _end_of_line_if_trivia(text, value_end)
    return (
        text[:value_end]
        + ","
        + text[value_end:insert_at]
        + "\n"
        + indent
        + entry
        + text[insert_at:]
    )


def loads(text: str) -> Any:
    """Decode a JSONC value, ignoring comments and trailing commas.

    Raises:
        JsoncSyntaxError: If a comment or string is unterminated
        json.JSONDecodeError: If the remaining text is not valid JSON
    """
    out: list[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        char = text[pos]
        if char == '"':
            end = _scan_string(text, pos)
            out.append(text[pos:end])
            pos = end
        elif text.startswith("//", pos) or text.startswith("/*", pos):
            pos = _skip_trivia(text, pos)
            out.append(" ")
        elif char == ",":
            following = _skip_trivia(text, pos + 1)
            if following < length and text[following] in "}]":
                pos += 1
            else:
                out.append(char)
                pos += 1
        else:
            out.append(char)
            pos += 1
    return json.loads("".join(out))
