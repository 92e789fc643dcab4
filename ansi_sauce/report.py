from __future__ import annotations

import os

from ansi_sauce.file_types import (
    DEFAULT_TABLES,
    ClassificationTables,
    data_type_name,
    dimensions,
    file_type_name,
    mime_type,
)
from ansi_sauce.sauce import SauceRecord


def format_version(version: bytes) -> str:
    return ''.join(str(b) for b in version)


def asdict(sauce: SauceRecord, tables: ClassificationTables = DEFAULT_TABLES, fpath: str = '') -> dict:
    'JSON-friendly view of a record, with names and mime type resolved against `tables`'
    size = dimensions(sauce)
    result = {
        'sauce': {
            'signature': sauce.signature.decode('ascii'),
            'version': format_version(sauce.version),
            'title': sauce.title,
            'author': sauce.author,
            'group': sauce.group,
            'date': sauce.date.isoformat() if sauce.date else None,
            'filesize': sauce.filesize,
            'data_type': sauce.data_type,
            'file_type': sauce.file_type,
            'tinfo': list(sauce.tinfo),
            'comments': sauce.comments,
            'flags': sauce.flags.raw,
            'tinfo_s': sauce.tinfo_s.hex(),
        },
        'extended': {
            'data_type_name': data_type_name(sauce, tables),
            'file_type_name': file_type_name(sauce, tables),
            'mime_type': mime_type(sauce, tables),
            'font': sauce.font(),
            'non_blink_mode': sauce.flags.non_blink_mode,
            'letter_spacing': sauce.flags.letter_spacing.description,
            'aspect_ratio': sauce.flags.aspect_ratio.description,
            'dimensions': None if size is None else {'width': size[0], 'height': size[1], 'unit': size[2]},
        },
    }
    if fpath:
        result['extended']['file_name'] = os.path.basename(fpath)
    return result


def dump(sauce: SauceRecord, tables: ClassificationTables = DEFAULT_TABLES) -> str:
    flags = sauce.flags
    lines = [
        f'id......: {sauce.signature.decode("ascii")}',
        f'version.: {format_version(sauce.version)}',
        f'title...: {sauce.title}',
        f'author..: {sauce.author}',
        f'group...: {sauce.group}',
        f'date....: {sauce.date.isoformat() if sauce.date else "-"}',
        f'filesize: {sauce.filesize}',
        f'datatype: {sauce.data_type} ({data_type_name(sauce, tables)})',
    ]
    if sauce.data_type in tables.file_type_names:
        lines.append(f'filetype: {sauce.file_type} ({file_type_name(sauce, tables)})')
    else:
        lines.append(f'filetype: {sauce.file_type}')
    lines.append('tinfo...: {}, {}, {}, {}'.format(*sauce.tinfo))

    size = dimensions(sauce)
    if size is not None:
        lines.append('size....: {} x {} {}'.format(*size))

    lines.extend([
        f'flags...: non-blink={flags.non_blink_mode} letter-spacing={flags.letter_spacing.name} aspect-ratio={flags.aspect_ratio.name}',
        f'font....: {sauce.font()}',
        f'mimetype: {mime_type(sauce, tables)}',
    ])
    return '\n'.join(lines)
