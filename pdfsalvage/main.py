#!/usr/bin/env python3
import argparse
import json
import os
import sys

from tqdm import tqdm

from pdfsalvage.config import Config
from pdfsalvage.extract import ExtractionOutcome, extract_text
from pdfsalvage.files import SourceError, expand_sources, read_source

EXIT_OK, EXIT_NO_TEXT, EXIT_SOURCE_ERROR = 0, 1, 2

def format_outcome(source: str, outcome: ExtractionOutcome, as_json: bool, show_header: bool) -> str:
    if as_json:
        return json.dumps({
            'source': source,
            'text': outcome.text,
            'succeeded': outcome.succeeded,
            'literals': outcome.literals,
            'used_fallback': outcome.used_fallback})
    elif show_header:
        return f"==> {source} <==\n{outcome.text}\n"
    else:
        return outcome.text

def debug_report(source: str, size: int, outcome: ExtractionOutcome) -> str:
    path = 'fallback' if outcome.used_fallback else 'structured'
    return f"[pdfsalvage] {source}: {size} bytes, {outcome.literals} literals, {path} path, {len(outcome.text)} chars"

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Recover readable text from PDF files without a PDF library")
    parser.add_argument('-m', '--min-length', type=int, default=Config['min_length'],
                        help="Minimum number of characters for an extraction to count as a success")
    parser.add_argument('--max-size', type=int, default=Config['max_size'], help="Largest input to read, in bytes")
    parser.add_argument('--inflate', action=argparse.BooleanOptionalAction, default=Config['inflate_streams'],
                        help="Try to zlib-inflate stream contents before scanning them")
    parser.add_argument('--strict', action='store_true', help="Reject inputs without a %%PDF- header")
    parser.add_argument('--json', action='store_true', help="Print one JSON object per source")
    parser.add_argument('--save', action='store_true', help="Store --min-length, --max-size and --inflate as the new defaults")
    parser.add_argument('sources', nargs='*', help="PDF files, directories, glob patterns or http(s) URLs")
    args = parser.parse_args(argv)
    if not args.sources and not args.save:
        parser.error("at least one source is required")
    debug = bool(int(os.getenv('PDFSALVAGE_DEBUG', '0')))

    if args.save:
        Config['min_length'] = args.min_length
        Config['max_size'] = args.max_size
        Config['inflate_streams'] = args.inflate
        if not args.sources:
            sys.exit(EXIT_OK)

    try:
        sources = expand_sources(args.sources)
    except SourceError as e:
        print(e, file=sys.stderr)
        sys.exit(EXIT_SOURCE_ERROR)

    status = EXIT_OK
    show_header = len(sources) > 1
    for source in tqdm(sources, unit='file', file=sys.stderr, disable=len(sources) < 2):
        try:
            data = read_source(source, max_size=args.max_size, require_pdf=args.strict)
        except SourceError as e:
            tqdm.write(str(e), file=sys.stderr)
            status = EXIT_SOURCE_ERROR
            continue

        outcome = extract_text(data, min_length=args.min_length, inflate_streams=args.inflate)
        if debug:
            tqdm.write(debug_report(source, len(data), outcome), file=sys.stderr)
        if not outcome.succeeded:
            tqdm.write(f"{source}: Could not recover enough readable text", file=sys.stderr)
            status = max(status, EXIT_NO_TEXT)
        if outcome.text or args.json:
            tqdm.write(format_outcome(source, outcome, args.json, show_header))

    sys.exit(status)


if __name__ == '__main__':
    main()
