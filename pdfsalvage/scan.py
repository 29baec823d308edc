import zlib
from typing import Iterator

WHITESPACE = b' \t\n\r\f\x00'
DELIMITERS = b'()<>[]{}/%'
OCTAL_DIGITS = b'01234567'
BACKSLASH = ord('\\')
OPEN_PAREN, CLOSE_PAREN = ord('('), ord(')')
OPEN_BRACKET, CLOSE_BRACKET = ord('['), ord(']')

# Operators that show a single string operand: `(s) Tj`, `(s) '` and `aw ac (s) "`
SHOW_OPERATORS = (b'Tj', b"'", b'"')
ARRAY_SHOW_OPERATORS = (b'TJ',)

# Escapes that would put a line break into the flat output
SPACE_ESCAPES = b'nrt'

# Inflated output is capped at this multiple of the compressed region
INFLATE_RATIO = 50

Region = tuple[int, int]


# Byte helpers

def skip_whitespace(data: bytes, i: int, end: int) -> int:
    while i < end and data[i] in WHITESPACE:
        i += 1
    return i

def is_regular(c: int) -> bool:
    return c not in WHITESPACE and c not in DELIMITERS

def is_boundary(data: bytes, i: int, end: int) -> bool:
    return i >= end or not is_regular(data[i])

def find_keyword(data: bytes, keyword: bytes, i: int, end: int | None = None) -> int:
    """Offset of the next `keyword` standing as its own token, or -1."""
    end = len(data) if end is None else end
    while (i := data.find(keyword, i, end)) != -1:
        if (i == 0 or not is_regular(data[i - 1])) and is_boundary(data, i + len(keyword), end):
            return i
        i += 1
    return -1

def match_operator(data: bytes, i: int, end: int, operators: tuple[bytes, ...]) -> bool:
    i = skip_whitespace(data, i, end)
    return any(data.startswith(op, i, end) and is_boundary(data, i + len(op), end) for op in operators)


# Region locators

def stream_regions(data: bytes) -> Iterator[Region]:
    i = 0
    while (i := find_keyword(data, b'stream', i)) != -1:
        start = i + len(b'stream')
        while start < len(data) and data[start] in b'\r\n':
            start += 1
        end = data.find(b'endstream', start)
        if end == -1:
            yield start, len(data)
            return
        yield start, end
        i = end + len(b'endstream')

def text_blocks(data: bytes) -> Iterator[Region]:
    i = 0
    while (i := find_keyword(data, b'BT', i)) != -1:
        start = i + len(b'BT')
        end = find_keyword(data, b'ET', start)
        if end == -1:
            yield start, len(data)
            return
        yield start, end
        i = end + len(b'ET')

def inflate(data: bytes) -> bytes | None:
    try:
        return zlib.decompressobj().decompress(data, max(len(data), 1) * INFLATE_RATIO)
    except zlib.error:
        return None


# String literals

def parse_literal(data: bytes, i: int, end: int) -> tuple[bytes | None, int]:
    """
    Scan the literal whose '(' sits at `i`. Returns the raw body and the offset just past
    the closing ')'. An unescaped '(' inside the body or running out of bytes breaks the
    literal: the body is None and scanning resumes at the offending byte.
    """
    j = i + 1
    while j < end:
        c = data[j]
        if c == BACKSLASH:
            j += 2
        elif c == CLOSE_PAREN:
            return data[i + 1:j], j + 1
        elif c == OPEN_PAREN:
            return None, j
        else:
            j += 1
    return None, end

def decode_literal(body: bytes) -> str:
    result = bytearray()
    i = 0
    while i < len(body):
        if body[i] != BACKSLASH:
            result.append(body[i])
            i += 1
            continue
        i += 1
        if i >= len(body):
            break  # Truncated escape
        c = body[i]
        if c in OCTAL_DIGITS:
            start = i
            while i < len(body) and i - start < 3 and body[i] in OCTAL_DIGITS:
                i += 1
            result.append(int(body[start:i], 8) & 0xFF)
        else:
            result.append(ord(' ') if c in SPACE_ESCAPES else c)
            i += 1
    return result.decode('latin-1')

def scan_literals(data: bytes, start: int = 0, end: int | None = None) -> Iterator[str]:
    end = len(data) if end is None else end
    array: list[bytes] | None = None
    i = start

    while i < end:
        c = data[i]
        if c == OPEN_PAREN:
            body, i = parse_literal(data, i, end)
            if body is None:
                continue
            if match_operator(data, i, end, SHOW_OPERATORS):
                array = None
                yield decode_literal(body)
            elif array is not None:
                array.append(body)
        elif c == OPEN_BRACKET:
            array = []
            i += 1
        elif c == CLOSE_BRACKET:
            if array is not None and match_operator(data, i + 1, end, ARRAY_SHOW_OPERATORS):
                yield from (decode_literal(body) for body in array)
            array = None
            i += 1
        else:
            i += 1
