import argparse
import base64
import json
import logging
import os
import sys
from zipnames.lib.archive import ArchiveListing
from zipnames.lib.exceptions import InvalidArchiveError


class BytesEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, bytes):
            return base64.b64encode(obj).decode("ascii")
        return json.JSONEncoder.default(self, obj)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")


def main(argv=None):
    parser = argparse.ArgumentParser(description="List ZIP entries with their filenames correctly decoded.")
    parser.add_argument("archive", help="Path to the ZIP file.")
    parser.add_argument(
        "-e", "--encoding", help="Encoding for names without the UTF-8 flag (e.g. sjis, gbk, korean)."
    )
    parser.add_argument("--json", action="store_true", help="Dump the full listing as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detection decisions.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not os.path.exists(args.archive):
        print(f"Error: File not found at {args.archive}", file=sys.stderr)
        return 1

    try:
        listing = ArchiveListing(filepath=args.archive, encoding=args.encoding)
    except InvalidArchiveError as e:
        print(f"Error reading archive: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(listing.model_dump(), indent=2, ensure_ascii=False, cls=BytesEncoder))
    else:
        for name in listing.names():
            print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
