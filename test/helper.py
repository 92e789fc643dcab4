from typing import Any

DEFAULT_WINDOW_KWARGS: dict[str, Any] = {
    'signature': b'SAUCE',
    'version': b'00',
    'title': 'Test Title',
    'author': 'Author',
    'group': 'Group',
    'date': '20230615',
    'filesize': 1024,
    'data_type': 1,
    'file_type': 0,
    'tinfo': (80, 25, 0, 0),
    'comments': 0,
    'flags': 0b00000101,
    'tinfo_s': b'',
}


def sauce_window(**kwargs: Any) -> bytes:
    '''
    Build a 128 byte SAUCE window laid out the way the decoder reads it.
    The size field occupies bytes 91-94, so byte 94 is written twice and ends
    up holding data_type.
    '''
    v = DEFAULT_WINDOW_KWARGS | kwargs
    window = bytearray(128)
    window[0:5] = v['signature']
    window[5:7] = v['version']
    window[7:41] = v['title'].encode('cp437').ljust(34, b' ')
    window[41:61] = v['author'].encode('cp437').ljust(20, b' ')
    window[61:81] = v['group'].encode('cp437').ljust(20, b' ')
    window[82:90] = v['date'].encode('latin-1')
    window[91:95] = v['filesize'].to_bytes(4, byteorder='little')
    window[94] = v['data_type']
    window[95] = v['file_type']
    for i, value in enumerate(v['tinfo']):
        window[96 + i * 2 : 98 + i * 2] = value.to_bytes(2, byteorder='little')
    window[104] = v['comments']
    window[105] = v['flags']
    window[106:128] = v['tinfo_s'].ljust(22, b'\x00')
    return bytes(window)


def sauce_file_data(prefix: bytes = b'Hello World\x1a', **kwargs: Any) -> bytes:
    return prefix + sauce_window(**kwargs)
