"""
Recover readable text from raw PDF bytes without a PDF library.

The structured pass walks `stream ... endstream` regions and `BT ... ET` blocks for
strings shown by `Tj`, `'`, `"` and `TJ`. When that yields less than `min_length`
characters, the printable runs of the whole buffer are appended as a last resort.
Reading order follows byte order; positioning operators are not interpreted.

`succeeded` is true once the text reaches `min_length` characters; structured text
that reaches the same bound skips the fallback. Empty text never succeeds.
"""
import re
from dataclasses import dataclass
from typing import Iterator

from pdfsalvage.fallback import fallback_text
from pdfsalvage.scan import inflate, scan_literals, stream_regions, text_blocks

DEFAULT_MIN_LENGTH = 100

@dataclass(frozen=True)
class ExtractionOutcome:
    text: str
    succeeded: bool
    literals: int = 0
    used_fallback: bool = False

def normalize_whitespace(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()

def structured_literals(data: bytes, inflate_streams: bool = False) -> Iterator[str]:
    for start, end in stream_regions(data):
        if inflate_streams and (contents := inflate(data[start:end])):
            yield from scan_literals(contents)
        else:
            yield from scan_literals(data, start, end)
    for start, end in text_blocks(data):
        yield from scan_literals(data, start, end)

def extract_text(raw_bytes: bytes, min_length: int = DEFAULT_MIN_LENGTH, inflate_streams: bool = False) -> ExtractionOutcome:
    data = bytes(raw_bytes)
    literals = [literal for literal in structured_literals(data, inflate_streams) if literal.strip()]
    text = normalize_whitespace(' '.join(literals))

    used_fallback = len(text) < min_length
    if used_fallback:
        text = normalize_whitespace(f'{text} {fallback_text(data)}')

    return ExtractionOutcome(
        text=text,
        succeeded=bool(text) and len(text) >= min_length,
        literals=len(literals),
        used_fallback=used_fallback)
