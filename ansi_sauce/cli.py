#!/usr/bin/env python3

from __future__ import annotations
from argparse import ArgumentParser, ArgumentTypeError
import sys

from laser_prynter import pp

from ansi_sauce import log
from ansi_sauce.log import dprint
from ansi_sauce.report import asdict, dump
from ansi_sauce.sauce import DEFAULT_ENCODING, SauceError, SauceRecord, parse_path, parse_reader


def codec(value: str) -> str:
    'argparse type: a codec name bytes.decode() accepts'
    try:
        b''.decode(value)
    except LookupError as e:
        raise ArgumentTypeError(str(e)) from e
    return value


def parse_args(argv: list[str] | None = None) -> dict:
    parser = ArgumentParser(prog='ansi-sauce', description='Print the SAUCE record appended to a file.')
    parser.add_argument('fpaths',       nargs='+', metavar='FILE',                    help='File(s) to read the SAUCE record from.')
    parser.add_argument('--json',     '-j', action='store_true', default=False,       help='Output the SAUCE record as JSON.')
    parser.add_argument('--stream',         action='store_true', default=False,       help='Read the whole file as a stream instead of seeking to the record.')
    parser.add_argument('--encoding', '-e', type=codec,          default=DEFAULT_ENCODING, help='Codec for the title/author/group fields (default: cp437).')
    parser.add_argument('--verbose',  '-v', action='store_true', default=False,       help='Enable verbose debug output.')
    return parser.parse_args(argv).__dict__


def read_record(fpath: str, encoding: str, stream: bool) -> SauceRecord:
    if stream:
        with open(fpath, 'rb') as f:
            return parse_reader(f, encoding)
    return parse_path(fpath, encoding)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    log.set_debug(args.pop('verbose'))

    failed = 0
    for i, fpath in enumerate(args['fpaths']):
        dprint(f'Reading SAUCE record from {fpath!r}')
        try:
            sauce = read_record(fpath, args['encoding'], args['stream'])
        except (SauceError, OSError) as e:
            print(f'{fpath}: {e}', file=sys.stderr)
            failed += 1
            continue

        if args['json']:
            pp.enabled = True
            pp.ppd(asdict(sauce, fpath=fpath), indent=2)
        else:
            if i > 0:
                print()
            if len(args['fpaths']) > 1:
                print(f'{fpath}:')
            print(dump(sauce))

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
