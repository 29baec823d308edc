import re
from typing import Iterator

MIN_RUN = 10

# Dictionary delimiters and object/stream keywords; runs holding these are PDF syntax, not prose
STRUCTURAL_NOISE = re.compile(rb'<<|>>|endobj|endstream|\bobj\b|\bstream\b')

def readable_runs(data: bytes, start: int = 0, end: int | None = None, min_run: int = MIN_RUN) -> Iterator[bytes]:
    pattern = re.compile(rb'[\x20-\x7e]{%d,}' % max(min_run, 1))
    for match in pattern.finditer(data, start, len(data) if end is None else end):
        yield match.group()

def is_structural_noise(run: bytes) -> bool:
    return STRUCTURAL_NOISE.search(run) is not None

def fallback_text(data: bytes, start: int = 0, end: int | None = None, min_run: int = MIN_RUN) -> str:
    runs = (run for run in readable_runs(data, start, end, min_run) if not is_structural_noise(run))
    return ' '.join(run.decode('ascii') for run in runs)
