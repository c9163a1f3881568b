import argparse
import functools
import json
import logging
import sys
import typing

from ogtags.config import FetchConfig
from ogtags.fetch import fetch_tags
from ogtags.logging_config import setup_logging
from ogtags.tags import TagCollection, merge


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ogtags', description="Print the Open Graph tags of one or more pages")
    parser.add_argument('urls', type=str, nargs='+', help="Pages to read, tags of later pages are appended")
    parser.add_argument('--timeout', type=float, help="Request timeout in seconds", default=FetchConfig.timeout)
    parser.add_argument('--json', action='store_true', help="Print the tags as a JSON object")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging")
    return parser


def main(argv: typing.List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = FetchConfig(timeout=args.timeout)
    collections = [fetch_tags(url, config) for url in args.urls]
    tags = functools.reduce(merge, collections, TagCollection())

    if args.json:
        print(json.dumps(tags.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(tags, end='')
    return 0 if len(tags) > 0 else 1


if __name__ == '__main__':
    sys.exit(main())
