from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from ansi_sauce.sauce import SauceRecord

DATA_TYPE_NONE        = 0
DATA_TYPE_CHARACTER   = 1
DATA_TYPE_BITMAP      = 2
DATA_TYPE_VECTOR      = 3
DATA_TYPE_AUDIO       = 4
DATA_TYPE_BINARY_TEXT = 5
DATA_TYPE_XBIN        = 6
DATA_TYPE_ARCHIVE     = 7
DATA_TYPE_EXECUTABLE  = 8

# data types with a single fixed shape, so no per-file-type table
FIXED_FILE_TYPE_NAMES = {
    DATA_TYPE_BINARY_TEXT: 'BinaryText',
    DATA_TYPE_XBIN:        'XBin',
    DATA_TYPE_EXECUTABLE:  'Executable',
}
FIXED_MIME_TYPES = {
    DATA_TYPE_BINARY_TEXT: 'text/x-binary',
    DATA_TYPE_XBIN:        'text/x-xbin',
}
FALLBACK_MIME_TYPE = 'application/octet-stream'

# character file types whose tinfo1/tinfo2 are a column/line count
CHARACTER_GRID_FILE_TYPES = {0, 1, 2, 4, 5, 8}
CHARACTER_RIP_FILE_TYPE = 3
DEFAULT_CHARACTER_WIDTH = 80


class ClassificationTables(NamedTuple):
    '''
    Lookup data for turning (data_type, file_type) into names and mime types.

    type_names:      data_type -> name
    file_type_names: data_type -> {file_type -> name}, sparse
    mime_types:      data_type -> {file_type -> mime type}, sparse
    '''

    type_names: Mapping[int, str]
    file_type_names: Mapping[int, Mapping[int, str]]
    mime_types: Mapping[int, Mapping[int, str]]

    @staticmethod
    def build(
        type_names: dict[int, str],
        file_type_names: dict[int, dict[int, str]],
        mime_types: dict[int, dict[int, str]],
    ) -> ClassificationTables:
        'freeze plain dicts into read-only tables'
        return ClassificationTables(
            type_names=MappingProxyType(dict(type_names)),
            file_type_names=MappingProxyType({k: MappingProxyType(dict(v)) for k, v in file_type_names.items()}),
            mime_types=MappingProxyType({k: MappingProxyType(dict(v)) for k, v in mime_types.items()}),
        )


DATA_TYPE_NAMES = {
    DATA_TYPE_NONE:        'None',
    DATA_TYPE_CHARACTER:   'Character',
    DATA_TYPE_BITMAP:      'Bitmap',
    DATA_TYPE_VECTOR:      'Vector',
    DATA_TYPE_AUDIO:       'Audio',
    DATA_TYPE_BINARY_TEXT: 'BinaryText',
    DATA_TYPE_XBIN:        'XBin',
    DATA_TYPE_ARCHIVE:     'Archive',
    DATA_TYPE_EXECUTABLE:  'Executable',
}

FILE_TYPE_NAMES = {
    DATA_TYPE_NONE: {
        0: 'Undefined',
    },
    DATA_TYPE_CHARACTER: {
        0: 'ASCII',
        1: 'ANSi',
        2: 'ANSiMation',
        3: 'RIP script',
        4: 'PCBoard',
        5: 'Avatar',
        6: 'HTML',
        7: 'Source',
        8: 'TundraDraw',
    },
    DATA_TYPE_BITMAP: {
        0:  'GIF',
        1:  'PCX',
        2:  'LBM/IFF',
        3:  'TGA',
        4:  'FLI',
        5:  'FLC',
        6:  'BMP',
        7:  'GL',
        8:  'DL',
        9:  'WPG',
        10: 'PNG',
        11: 'JPG',
        12: 'MPG',
        13: 'AVI',
    },
    DATA_TYPE_VECTOR: {
        0: 'DXF',
        1: 'DWG',
        2: 'WPG',
        3: '3DS',
    },
    DATA_TYPE_AUDIO: {
        0:  'MOD',
        1:  '669',
        2:  'STM',
        3:  'S3M',
        4:  'MTM',
        5:  'FAR',
        6:  'ULT',
        7:  'AMF',
        8:  'DMF',
        9:  'OKT',
        10: 'ROL',
        11: 'CMF',
        12: 'MID',
        13: 'SADT',
        14: 'VOC',
        15: 'WAV',
        16: 'SMP8',
        17: 'SMP8S',
        18: 'SMP16',
        19: 'SMP16S',
        20: 'PATCH8',
        21: 'PATCH16',
        22: 'XM',
        23: 'HSC',
        24: 'IT',
    },
    DATA_TYPE_ARCHIVE: {
        0: 'ZIP',
        1: 'ARJ',
        2: 'LZH',
        3: 'ARC',
        4: 'TAR',
        5: 'ZOO',
        6: 'RAR',
        7: 'UC2',
        8: 'PAK',
        9: 'SQZ',
    },
}

MIME_TYPES = {
    DATA_TYPE_CHARACTER: {
        0: 'text/plain',
        1: 'text/x-ansi',
        2: 'text/x-ansimation',
        3: 'application/x-rip',
        4: 'text/x-pcboard',
        5: 'text/x-avatar',
        6: 'text/html',
        7: 'text/plain',
        8: 'text/x-tundra',
    },
    DATA_TYPE_BITMAP: {
        0:  'image/gif',
        1:  'image/x-pcx',
        2:  'image/x-ilbm',
        3:  'image/x-tga',
        4:  'video/x-fli',
        5:  'video/x-flc',
        6:  'image/bmp',
        7:  'video/x-gl',
        8:  'video/x-dl',
        9:  'image/x-wpg',
        10: 'image/png',
        11: 'image/jpeg',
        12: 'video/mpeg',
        13: 'video/x-msvideo',
    },
    DATA_TYPE_VECTOR: {
        0: 'image/vnd.dxf',
        1: 'image/vnd.dwg',
        2: 'image/x-wpg',
        3: 'application/x-3ds',
    },
    DATA_TYPE_AUDIO: {
        0:  'audio/x-mod',
        1:  'audio/x-669',
        2:  'audio/x-stm',
        3:  'audio/x-s3m',
        4:  'audio/x-mtm',
        5:  'audio/x-far',
        6:  'audio/x-ult',
        7:  'audio/x-amf',
        8:  'audio/x-dmf',
        9:  'audio/x-okt',
        10: 'audio/x-rol',
        11: 'audio/x-cmf',
        12: 'audio/midi',
        13: 'audio/x-sadt',
        14: 'audio/x-voc',
        15: 'audio/wav',
        22: 'audio/x-xm',
        23: 'audio/x-hsc',
        24: 'audio/x-it',
    },
    DATA_TYPE_ARCHIVE: {
        0: 'application/zip',
        1: 'application/x-arj',
        2: 'application/x-lzh-compressed',
        3: 'application/x-arc',
        4: 'application/x-tar',
        5: 'application/x-zoo',
        6: 'application/vnd.rar',
        7: 'application/x-uc2',
        8: 'application/x-pak',
        9: 'application/x-sqz',
    },
}

DEFAULT_TABLES = ClassificationTables.build(DATA_TYPE_NAMES, FILE_TYPE_NAMES, MIME_TYPES)


def data_type_name(sauce: SauceRecord, tables: ClassificationTables = DEFAULT_TABLES) -> str:
    return tables.type_names.get(sauce.data_type, '')


def file_type_name(sauce: SauceRecord, tables: ClassificationTables = DEFAULT_TABLES) -> str:
    names = tables.file_type_names.get(sauce.data_type)
    if names is not None:
        return names.get(sauce.file_type, '')
    return FIXED_FILE_TYPE_NAMES.get(sauce.data_type, '')


def mime_type(sauce: SauceRecord, tables: ClassificationTables = DEFAULT_TABLES) -> str:
    'Never empty: anything unresolved is application/octet-stream.'
    types = tables.mime_types.get(sauce.data_type)
    if types is not None:
        mime = types.get(sauce.file_type, '')
    else:
        mime = FIXED_MIME_TYPES.get(sauce.data_type, '')
    return mime or FALLBACK_MIME_TYPE


def dimensions(sauce: SauceRecord) -> Tuple[int, int, str] | None:
    'Width, height and unit described by tinfo1/tinfo2, where the file type defines them.'
    width, height = sauce.tinfo[0], sauce.tinfo[1]
    if sauce.data_type == DATA_TYPE_CHARACTER:
        if sauce.file_type in CHARACTER_GRID_FILE_TYPES:
            return (width or DEFAULT_CHARACTER_WIDTH, height, 'characters')
        if sauce.file_type == CHARACTER_RIP_FILE_TYPE:
            return (width, height, 'pixels')
    elif sauce.data_type == DATA_TYPE_BITMAP:
        return (width, height, 'pixels')
    return None
