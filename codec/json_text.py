# codec/json_text.py

"""
Hand-rolled JSON string helpers.

Only one string field is ever read from a payload, so we scan the text
instead of parsing the whole document. The upstream payloads are small and
their shape is fixed.
"""

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "/": "/",
    "b": "\b",
    "f": "\f",
}

_ENCODE_MAP = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

_WHITESPACE = " \t\n\r"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class ScanError(ValueError):
    """Base error for field extraction."""


class FieldNotFound(ScanError):
    def __init__(self, field_name: str):
        super().__init__(f'Field "{field_name}" not found')
        self.field_name = field_name


class MalformedField(ScanError):
    """
    The field exists but its value is not a complete string literal.

    reason is one of:
    - "unexpected_character": something other than whitespace, ':' or '"'
      sits between the field name and the value
    - "no_opening_quote": input ended before the value started
    - "incomplete": input ended before the closing quote
    """

    def __init__(self, field_name: str, reason: str, detail: str = ""):
        message = f'Malformed value for "{field_name}": {reason}'
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.field_name = field_name
        self.reason = reason


# -------------------------------------------------
# Encoding
# -------------------------------------------------

def escape_json(text: str) -> str:
    """Escape text so it can sit between double quotes in a JSON document."""
    out = []
    for ch in text:
        mapped = _ENCODE_MAP.get(ch)
        if mapped is not None:
            out.append(mapped)
        elif ord(ch) < 0x20 or 0xD800 <= ord(ch) <= 0xDFFF:
            # control characters and unpaired surrogates cannot go out raw
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


# -------------------------------------------------
# Decoding
# -------------------------------------------------

def _read_unicode_escape(text: str, pos: int):
    """
    Read the four hex digits of a \\u escape starting at pos.
    Returns (code_point, next_pos) or (None, pos) when they are missing.
    """
    digits = text[pos:pos + 4]
    if len(digits) == 4 and all(c in _HEX_DIGITS for c in digits):
        return int(digits, 16), pos + 4
    return None, pos


def _scan_string(text: str, start: int):
    """
    Decode an escaped string body starting at start.

    Stops at the first unescaped double quote and returns
    (decoded, index_of_closing_quote). The index is -1 when the
    input ends first.
    """
    out = []
    escaped = False
    i = start
    n = len(text)

    while i < n:
        ch = text[i]

        if escaped:
            escaped = False
            if ch == "u":
                code, nxt = _read_unicode_escape(text, i + 1)
                if code is None:
                    out.append(ch)
                    i += 1
                    continue

                # Join a UTF-16 surrogate pair into one character
                if 0xD800 <= code <= 0xDBFF and text[nxt:nxt + 2] == "\\u":
                    low, after = _read_unicode_escape(text, nxt + 2)
                    if low is not None and 0xDC00 <= low <= 0xDFFF:
                        code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                        nxt = after

                out.append(chr(code))
                i = nxt
                continue

            out.append(_SIMPLE_ESCAPES.get(ch, ch))
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            return "".join(out), i
        else:
            out.append(ch)
        i += 1

    return "".join(out), -1


def decode_escapes(raw: str) -> str:
    """
    Decode the backslash escapes of a string body that has already been
    cut out of its surrounding quotes.
    """
    out = []
    pos = 0
    while True:
        chunk, stop = _scan_string(raw, pos)
        out.append(chunk)
        if stop == -1:
            return "".join(out)
        # a bare quote in an already-cut body is literal text
        out.append('"')
        pos = stop + 1


# -------------------------------------------------
# Field extraction
# -------------------------------------------------

def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def extract_field(blob: str, field_name: str) -> str:
    """
    Return the decoded string value of the first "field_name" in blob.

    Raises FieldNotFound when the quoted name does not appear and
    MalformedField when the value is not a complete string literal.
    """
    key = f'"{field_name}"'
    key_pos = blob.find(key)
    if key_pos == -1:
        raise FieldNotFound(field_name)

    pos = _skip_whitespace(blob, key_pos + len(key))
    if pos >= len(blob):
        raise MalformedField(field_name, "no_opening_quote")
    if blob[pos] != ":":
        raise MalformedField(field_name, "unexpected_character", repr(blob[pos]))

    pos = _skip_whitespace(blob, pos + 1)
    if pos >= len(blob):
        raise MalformedField(field_name, "no_opening_quote")
    if blob[pos] != '"':
        raise MalformedField(field_name, "unexpected_character", repr(blob[pos]))

    value, closing = _scan_string(blob, pos + 1)
    if closing == -1:
        raise MalformedField(field_name, "incomplete")

    return value
