"""Entry point: import a novel file and print its chapter list as JSON."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from novel_import.config import load_config
from novel_import.ingestion.reader import SUPPORTED_ENCODINGS, FileReadError
from novel_import.ingestion.segmenter import CHAPTER_MODES
from novel_import.ingestion.session import ImportSession


def main(argv: list[str] | None = None) -> int:
    """Read the given file, split it into chapters and print the records."""
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument("file", help="TXT, MD or DOCX file to import")
    arg_parser.add_argument("--encoding", choices=SUPPORTED_ENCODINGS)
    arg_parser.add_argument("--mode", choices=CHAPTER_MODES)
    arg_parser.add_argument("--config", default="config.yaml")
    args = arg_parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValidationError as exc:
        print(f"Error: invalid configuration\n{exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    session = ImportSession(config=config.importing)
    if args.encoding:
        session.set_encoding(args.encoding)
    if args.mode:
        session.set_mode(args.mode)

    try:
        session.read_file(args.file)
    except (FileNotFoundError, ValueError, FileReadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    chapters = session.build_chapter_list()
    payload = [chapter.model_dump(mode="json") for chapter in chapters]
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
