import glob
import itertools
from pathlib import Path

import requests

DEFAULT_MAX_SIZE = 10 * 1024 * 1024
PDF_HEADER = b'%PDF-'
HEADER_WINDOW = 1024
CHUNK_SIZE = 64 * 1024

class SourceError(RuntimeError):
    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message

def is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))

def looks_like_pdf(data: bytes) -> bool:
    return PDF_HEADER in data[:HEADER_WINDOW]


# File helpers

def safe_glob(fn: str) -> list[str]:
    result = glob.glob(fn)
    if not result:
        raise FileNotFoundError(fn)
    return result

def list_files(path: Path) -> list[Path]:
    if path.name.startswith('.'):
        return []
    elif path.is_file():
        return [path]
    elif path.is_dir():
        children = sorted(child for child in path.iterdir() if child.is_dir() or (child.is_file() and child.suffix.lower() == '.pdf'))
        return list(itertools.chain.from_iterable(list_files(child) for child in children))
    else:
        raise SourceError(str(path), "Unknown file type")

def expand_sources(sources: list[str]) -> list[str]:
    expanded = []
    for fn in sources:
        if is_url(fn):
            expanded.append(fn)
            continue
        try:
            file_names = sorted(safe_glob(fn))
        except FileNotFoundError:
            raise SourceError(fn, "No such file or directory") from None
        expanded.extend(str(path) for path in itertools.chain.from_iterable(list_files(Path(name)) for name in file_names))
    return expanded


# Readers

def read_path(path: Path, max_size: int = DEFAULT_MAX_SIZE) -> bytes:
    try:
        size = path.stat().st_size
        if size > max_size:
            raise SourceError(str(path), f"File is {size} bytes, larger than the {max_size} byte limit")
        return path.read_bytes()
    except FileNotFoundError:
        raise SourceError(str(path), "No such file or directory") from None
    except IsADirectoryError:
        raise SourceError(str(path), "Is a directory") from None
    except PermissionError:
        raise SourceError(str(path), "Permission denied") from None

def fetch_url(url: str, max_size: int = DEFAULT_MAX_SIZE, timeout: float = 30) -> bytes:
    try:
        response = requests.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise SourceError(url, f"Request failed: {e}") from e

    try:
        response.raise_for_status()
        data = bytearray()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            data += chunk
            if len(data) > max_size:
                raise SourceError(url, f"Response is larger than the {max_size} byte limit")
        return bytes(data)
    except requests.RequestException as e:
        raise SourceError(url, f"Request failed: {e}") from e
    finally:
        response.close()

def read_source(source: str, max_size: int = DEFAULT_MAX_SIZE, require_pdf: bool = False) -> bytes:
    data = fetch_url(source, max_size) if is_url(source) else read_path(Path(source), max_size)
    if require_pdf and not looks_like_pdf(data):
        raise SourceError(source, "Not a PDF file (no %PDF- header)")
    return data
