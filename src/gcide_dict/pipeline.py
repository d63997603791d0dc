#!/usr/bin/env python3
"""
Converts the CIDE source files into a dictionary and its XML rendering.

Reads every file in the source directory whose name matches the CIDE
pattern, extracts entries, writes a JSON snapshot, post-processes the
entries and writes the final JSON and Dictionary Services XML.
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from gcide_dict.assemble import build_xml, unique
from gcide_dict.extract import (
    ACCEPTED_SOURCE,
    PLACEHOLDER_ENTRY,
    Dictionary,
    Index,
    extract_document,
)
from gcide_dict.normalize import UnknownEntityLog, normalize_text
from gcide_dict.postprocess import post_process_dictionary

PRELIM_FILENAME = "dictPrelim.json"
DICT_FILENAME = "dict.json"
UNKNOWN_REPORT_FILENAME = "unknown_entities.md"


class Settings(NamedTuple):
    """Options for one conversion run."""
    source_dir: Path = Path("srcFiles")
    file_pattern: str = r"CIDE\.[A-Z]"
    output_dir: Path = Path("output")
    xml_path: Path = Path("template/dict.xml")
    only_webster: bool = True
    accepted_source: str = ACCEPTED_SOURCE
    encoding: str = "utf-8"
    verbose: bool = False


class RunState:
    """Dictionary, index and unknown entities owned by a single run."""

    def __init__(self) -> None:
        self.dictionary: Dictionary = {}
        self.index: Index = {}
        self.unknown = UnknownEntityLog()


def find_source_files(settings: Settings) -> list[Path]:
    """Files in the source directory whose name matches the file pattern, sorted."""
    pattern = re.compile(settings.file_pattern)
    return sorted(
        path for path in settings.source_dir.iterdir()
        if path.is_file() and pattern.search(path.name)
    )


def read_documents(paths: Iterable[Path], encoding: str = "utf-8") -> Iterator[tuple[Path, str]]:
    """Yield (path, text) for each file. Undecodable bytes become U+FFFD."""
    for path in paths:
        yield path, path.read_text(encoding=encoding, errors="replace")


def extract_files(paths: Iterable[Path], state: RunState, settings: Settings) -> int:
    """Normalize and extract every file into state. Returns the number of files."""
    accepted_source = settings.accepted_source if settings.only_webster else None

    count = 0
    for path, text in read_documents(paths, settings.encoding):
        text = normalize_text(text, state.unknown, path.name)
        extract_document(text, state.dictionary, state.index, accepted_source)
        print(f"Parsed: {path.name}")
        count += 1

    return count


def finish_extraction(state: RunState) -> None:
    """Drop the pre-entry bucket and deduplicate alias lists."""
    state.dictionary.pop(PLACEHOLDER_ENTRY, None)
    state.index.pop(PLACEHOLDER_ENTRY, None)

    for name, aliases in state.index.items():
        state.index[name] = unique(aliases)


def write_json(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4, ensure_ascii=False), encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def run(settings: Settings) -> RunState:
    """
    Run the whole conversion.

    OSError from reading or writing files propagates; nothing is written
    after a failure.
    """
    state = RunState()

    paths = find_source_files(settings)
    print(f"Processing {len(paths)} files in {settings.source_dir}...")
    count = extract_files(paths, state, settings)
    print(f"Finished reading files: {count}")

    finish_extraction(state)
    write_json(
        settings.output_dir / PRELIM_FILENAME,
        {"dictionary": state.dictionary, "index": state.index},
    )

    post_process_dictionary(state.dictionary, settings.verbose)

    print("Done; starting to build XML")
    xml = build_xml(state.dictionary, state.index)

    write_json(settings.output_dir / DICT_FILENAME, state.dictionary)
    write_text(settings.xml_path, xml)
    print(f"Wrote: {settings.output_dir / DICT_FILENAME}")
    print(f"Wrote: {settings.xml_path}")

    report_path = settings.output_dir / UNKNOWN_REPORT_FILENAME
    state.unknown.save_report(report_path)
    print(f"Unknown entities report saved to: {report_path}")

    return state


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Settings()
    parser = argparse.ArgumentParser(
        description="Convert CIDE source files into a Dictionary Services XML document"
    )
    parser.add_argument(
        "source_dir",
        nargs="?",
        default=str(defaults.source_dir),
        help="Directory holding the CIDE.* source files",
    )
    parser.add_argument(
        "--output-dir",
        default=str(defaults.output_dir),
        help="Directory for the JSON files and the unknown entities report",
    )
    parser.add_argument(
        "--xml",
        default=str(defaults.xml_path),
        help="Path of the generated XML document",
    )
    parser.add_argument(
        "--pattern",
        default=defaults.file_pattern,
        help="Regular expression selecting source file names",
    )
    parser.add_argument(
        "--source",
        default=defaults.accepted_source,
        help="Source label of the paragraphs to keep",
    )
    parser.add_argument(
        "--all-sources",
        action="store_true",
        help="Keep paragraphs from every source",
    )
    parser.add_argument(
        "--encoding",
        default=defaults.encoding,
        help="Encoding of the source files",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every post-processed entry",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    settings = Settings(
        source_dir=Path(args.source_dir),
        file_pattern=args.pattern,
        output_dir=Path(args.output_dir),
        xml_path=Path(args.xml),
        only_webster=not args.all_sources,
        accepted_source=args.source,
        encoding=args.encoding,
        verbose=args.verbose,
    )

    if not settings.source_dir.is_dir():
        print(f"Error: Not a directory: {settings.source_dir}", file=sys.stderr)
        return 1

    state = run(settings)
    print(f"Done. {len(state.dictionary)} entries.")

    print()
    print("--- Unknown Entity Summary ---")
    print(state.unknown.report())

    return 0


if __name__ == "__main__":
    sys.exit(main())
