#!/usr/bin/env python3
"Unit tests for data/file type resolution in file_types.py"

import pytest

from ansi_sauce.file_types import (
    DEFAULT_TABLES,
    FALLBACK_MIME_TYPE,
    ClassificationTables,
    data_type_name,
    dimensions,
    file_type_name,
    mime_type,
)
from ansi_sauce.sauce import SauceRecord


class TestDataTypeName:
    'Test data_type_name()'

    @pytest.mark.parametrize(
        'data_type, expected',
        [
            (0, 'None'),
            (1, 'Character'),
            (2, 'Bitmap'),
            (5, 'BinaryText'),
            (6, 'XBin'),
            (8, 'Executable'),
        ],
    )
    def test_known(self, data_type: int, expected: str) -> None:
        assert data_type_name(SauceRecord(data_type=data_type)) == expected

    def test_unknown(self) -> None:
        assert data_type_name(SauceRecord(data_type=200)) == ''


class TestFileTypeName:
    'Test file_type_name()'

    def test_character_types(self) -> None:
        assert file_type_name(SauceRecord(data_type=1, file_type=0)) == 'ASCII'
        assert file_type_name(SauceRecord(data_type=1, file_type=1)) == 'ANSi'
        assert file_type_name(SauceRecord(data_type=1, file_type=8)) == 'TundraDraw'

    def test_bitmap_type(self) -> None:
        assert file_type_name(SauceRecord(data_type=2, file_type=10)) == 'PNG'

    def test_unknown_file_type_in_known_table(self) -> None:
        assert file_type_name(SauceRecord(data_type=1, file_type=99)) == ''

    @pytest.mark.parametrize(
        'data_type, expected',
        [
            (5, 'BinaryText'),
            (6, 'XBin'),
            (8, 'Executable'),
        ],
    )
    def test_fixed_names_ignore_file_type(self, data_type: int, expected: str) -> None:
        'the file type byte does not matter for these data types'

        for file_type in (0, 1, 80, 255):
            assert file_type_name(SauceRecord(data_type=data_type, file_type=file_type)) == expected

    def test_unknown_data_type(self) -> None:
        assert file_type_name(SauceRecord(data_type=42, file_type=0)) == ''


class TestMimeType:
    'Test mime_type()'

    def test_table_lookup(self) -> None:
        assert mime_type(SauceRecord(data_type=1, file_type=1)) == 'text/x-ansi'
        assert mime_type(SauceRecord(data_type=2, file_type=0)) == 'image/gif'

    def test_binary_text(self) -> None:
        assert mime_type(SauceRecord(data_type=5, file_type=80)) == 'text/x-binary'

    def test_xbin(self) -> None:
        assert mime_type(SauceRecord(data_type=6)) == 'text/x-xbin'

    def test_executable_falls_back(self) -> None:
        assert mime_type(SauceRecord(data_type=8)) == FALLBACK_MIME_TYPE

    @pytest.mark.parametrize(
        'data_type, file_type',
        [
            (0, 0),
            (1, 99),
            (4, 17),
            (42, 0),
            (255, 255),
        ],
    )
    def test_never_empty(self, data_type: int, file_type: int) -> None:
        assert mime_type(SauceRecord(data_type=data_type, file_type=file_type)) == 'application/octet-stream'


class TestClassificationTables:
    'Test injecting custom tables'

    def test_custom_tables(self) -> None:
        tables = ClassificationTables.build(
            type_names={1: 'Text'},
            file_type_names={1: {0: 'Plain'}},
            mime_types={1: {0: 'text/plain'}},
        )
        sauce = SauceRecord(data_type=1, file_type=0)

        assert data_type_name(sauce, tables) == 'Text'
        assert file_type_name(sauce, tables) == 'Plain'
        assert mime_type(sauce, tables) == 'text/plain'

    def test_empty_mime_in_table_falls_back(self) -> None:
        tables = ClassificationTables.build({}, {}, {1: {0: ''}})
        assert mime_type(SauceRecord(data_type=1, file_type=0), tables) == FALLBACK_MIME_TYPE

    def test_table_entry_overrides_fixed_name(self) -> None:
        'a table for a fixed-shape data type takes precedence'

        tables = ClassificationTables.build({}, {5: {0: 'Custom'}}, {5: {0: 'text/x-custom'}})
        sauce = SauceRecord(data_type=5, file_type=0)

        assert file_type_name(sauce, tables) == 'Custom'
        assert mime_type(sauce, tables) == 'text/x-custom'
        assert file_type_name(SauceRecord(data_type=5, file_type=1), tables) == ''
        assert mime_type(SauceRecord(data_type=5, file_type=1), tables) == FALLBACK_MIME_TYPE

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_TABLES.type_names[99] = 'Nope'  # type: ignore[index]
        with pytest.raises(TypeError):
            DEFAULT_TABLES.file_type_names[1][99] = 'Nope'  # type: ignore[index]

    def test_build_copies_input(self) -> None:
        names = {1: 'Text'}
        tables = ClassificationTables.build(names, {}, {})
        names[1] = 'Changed'

        assert tables.type_names[1] == 'Text'


class TestDimensions:
    'Test dimensions()'

    def test_ansi(self) -> None:
        assert dimensions(SauceRecord(data_type=1, file_type=1, tinfo=(160, 50, 0, 0))) == (160, 50, 'characters')

    def test_default_width(self) -> None:
        assert dimensions(SauceRecord(data_type=1, file_type=0, tinfo=(0, 25, 0, 0))) == (80, 25, 'characters')

    def test_rip_script(self) -> None:
        assert dimensions(SauceRecord(data_type=1, file_type=3, tinfo=(640, 350, 16, 0))) == (640, 350, 'pixels')

    def test_bitmap(self) -> None:
        assert dimensions(SauceRecord(data_type=2, file_type=10, tinfo=(0, 0, 0, 0))) == (0, 0, 'pixels')

    @pytest.mark.parametrize(
        'data_type, file_type',
        [
            (1, 6),
            (1, 7),
            (4, 0),
            (5, 80),
            (8, 0),
        ],
    )
    def test_undefined(self, data_type: int, file_type: int) -> None:
        assert dimensions(SauceRecord(data_type=data_type, file_type=file_type, tinfo=(80, 25, 0, 0))) is None
