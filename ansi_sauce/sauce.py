from __future__ import annotations

import os
import re
from datetime import date, timedelta
from enum import Enum
from typing import BinaryIO, NamedTuple, Tuple

from ansi_sauce.log import dprint

SAUCE_ID = b'SAUCE'
SAUCE_VERSION = b'\x00\x00'
SAUCE_SIZE = 128
DEFAULT_ENCODING = 'cp437'
READ_CHUNK_SIZE = 64 * 1024
ASCII_WHITESPACE = ' \t\n\r\v\f'

_DIGITS = re.compile(r'[+-]?[0-9]+')


class SauceError(ValueError):
    'base class for everything that stops a SAUCE record from being decoded'


class ShortRead(SauceError):
    'fewer than 128 bytes were available'


class MissingSignature(SauceError):
    'the trailing 128 bytes do not start with the SAUCE marker'


class LetterSpacing(Enum):
    LEGACY  = 0
    PX8     = 1
    PX9     = 2
    INVALID = 3

    @property
    def description(self) -> str:
        return LETTER_SPACING_MAP[self]


class AspectRatio(Enum):
    LEGACY  = 0
    STRETCH = 1
    SQUARE  = 2
    INVALID = 3

    @property
    def description(self) -> str:
        return ASPECT_RATIO_MAP[self]


LETTER_SPACING_MAP = {
    LetterSpacing.LEGACY:  'Legacy value. No preference.',
    LetterSpacing.PX8:     'Select 8 pixel font.',
    LetterSpacing.PX9:     'Select 9 pixel font.',
    LetterSpacing.INVALID: 'Not currently a valid value.',
}
ASPECT_RATIO_MAP = {
    AspectRatio.LEGACY:  'Legacy value. No preference.',
    AspectRatio.STRETCH: 'Image was created for a legacy device. When displayed on a device with square pixels, either the font or the image needs to be stretched.',
    AspectRatio.SQUARE:  'Image was created for a modern device with square pixels. No stretching is desired on a device with square pixels.',
    AspectRatio.INVALID: 'Not currently a valid value.',
}


class Flags(NamedTuple):
    'unpacked TFlags byte'

    raw: int = 0
    non_blink_mode: bool = False
    letter_spacing: LetterSpacing = LetterSpacing.LEGACY
    aspect_ratio: AspectRatio = AspectRatio.LEGACY


class SauceRecord(NamedTuple):
    '''
    A decoded SAUCE trailer. `date` is None when the stored date rolls over
    to before year 1 or past year 9999, which is what blank ('        ') and
    all-zero ('00000000') dates do.
    '''

    signature: bytes = SAUCE_ID
    version: bytes = SAUCE_VERSION
    title: str = ''
    author: str = ''
    group: str = ''
    date: date | None = None
    filesize: int = 0
    data_type: int = 0
    file_type: int = 0
    tinfo: Tuple[int, int, int, int] = (0, 0, 0, 0)
    comments: int = 0
    flags: Flags = Flags()
    tinfo_s: bytes = b'\x00' * 22

    @staticmethod
    def offsets() -> dict[str, Tuple[int, int]]:
        '''
        Byte ranges of each field, relative to the start of the 128 byte window.
        data_type is byte 94, which is also the last byte of filesize,
        and bytes 5-6, 81 and 90 are skipped.
        '''
        return {
            'signature': (0, 5),
            'title':     (7, 41),
            'author':    (41, 61),
            'group':     (61, 81),
            'date':      (82, 90),
            'filesize':  (91, 95),
            'data_type': (94, 95),
            'file_type': (95, 96),
            'tinfo1':    (96, 98),
            'tinfo2':    (98, 100),
            'tinfo3':    (100, 102),
            'tinfo4':    (102, 104),
            'comments':  (104, 105),
            'flags':     (105, 106),
            'tinfo_s':   (106, 128),
        }

    def font(self) -> str:
        'the TInfoS field read as a font name, NUL and space padding removed'
        return self.tinfo_s.decode('latin-1').strip('\x00 ')


def atoi(value: str) -> int:
    'parse a base-10 integer, anything that is not one becomes 0'
    if _DIGITS.fullmatch(value) is None:
        return 0
    return int(value)


def parse_date(value: str) -> date | None:
    '''
    Parse a YYYYMMDD string. Each part is read on its own and out of range
    months/days roll over into the neighbouring month/year, so '20230100'
    is 2022-12-31. Returns None if the result cannot be represented.
    '''
    year, month, day = atoi(value[0:4]), atoi(value[4:6]), atoi(value[6:8])
    year, month = year + (month - 1) // 12, (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        dprint(f'Unrepresentable SAUCE date {value!r}: {e}')
        return None


def parse_flags(raw_n: int) -> Flags:
    flags = Flags(
        raw=raw_n,
        non_blink_mode=bool(raw_n & 1),
        letter_spacing=LetterSpacing((raw_n >> 1) & 0b11),
        aspect_ratio=AspectRatio((raw_n >> 3) & 0b11),
    )
    dprint(f'Parsed flags from raw value {raw_n:08b}: {flags}')
    return flags


def _text(window: bytes, start: int, end: int, encoding: str) -> str:
    return window[start:end].decode(encoding, errors='replace').strip(ASCII_WHITESPACE)


def _uint(window: bytes, start: int, end: int) -> int:
    return int.from_bytes(window[start:end], byteorder='little', signed=False)


def parse_bytes(data: bytes | bytearray | memoryview, encoding: str = DEFAULT_ENCODING) -> SauceRecord:
    '''
    Decode the SAUCE record held in the last 128 bytes of `data`.
    Anything before the trailing window is ignored.
    '''
    if len(data) < SAUCE_SIZE:
        raise ShortRead(f'Short read: need {SAUCE_SIZE} bytes, got {len(data)}')

    o = len(data) - SAUCE_SIZE
    window = bytes(data[o:])
    if window[0:5] != SAUCE_ID:
        raise MissingSignature(f'No SAUCE record: found {window[0:5]!r} at offset {o}')
    dprint(f'Found SAUCE record at offset {o}')

    off = SauceRecord.offsets()
    date_start, date_end = off['date']
    tinfo_s_start, tinfo_s_end = off['tinfo_s']

    return SauceRecord(
        title=_text(window, *off['title'], encoding),
        author=_text(window, *off['author'], encoding),
        group=_text(window, *off['group'], encoding),
        date=parse_date(window[date_start:date_end].decode('latin-1')),
        filesize=_uint(window, *off['filesize']),
        data_type=_uint(window, *off['data_type']),
        file_type=_uint(window, *off['file_type']),
        tinfo=(
            _uint(window, *off['tinfo1']),
            _uint(window, *off['tinfo2']),
            _uint(window, *off['tinfo3']),
            _uint(window, *off['tinfo4']),
        ),
        comments=_uint(window, *off['comments']),
        flags=parse_flags(_uint(window, *off['flags'])),
        tinfo_s=window[tinfo_s_start:tinfo_s_end],
    )


def parse_file(f: BinaryIO, encoding: str = DEFAULT_ENCODING) -> SauceRecord:
    'Read only the trailing 128 bytes of a seekable binary file.'
    length = f.seek(0, os.SEEK_END)
    if length < SAUCE_SIZE:
        raise ShortRead(f'Short read: file is {length} bytes, need {SAUCE_SIZE}')

    f.seek(length - SAUCE_SIZE, os.SEEK_SET)
    window = f.read(SAUCE_SIZE)
    if len(window) != SAUCE_SIZE:
        raise ShortRead(f'Short read: got {len(window)} of {SAUCE_SIZE} bytes')
    return parse_bytes(window, encoding)


def parse_reader(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> SauceRecord:
    '''
    Drain a (possibly unseekable) binary stream and decode its trailer.
    An empty or None read is taken as end of stream.
    '''
    chunks = []
    while chunk := stream.read(READ_CHUNK_SIZE):
        if not isinstance(chunk, (bytes, bytearray)):
            raise TypeError(f'parse_reader needs a binary stream, read() returned {type(chunk).__name__}')
        chunks.append(chunk)
    data = b''.join(chunks)
    dprint(f'Read {len(data)} bytes from stream')
    if len(data) < SAUCE_SIZE:
        raise ShortRead(f'Short read: stream produced {len(data)} bytes, need {SAUCE_SIZE}')
    return parse_bytes(data, encoding)


def parse_path(fpath: str, encoding: str = DEFAULT_ENCODING) -> SauceRecord:
    with open(fpath, 'rb') as f:
        return parse_file(f, encoding)
