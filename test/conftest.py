import difflib


def hexdump(data: bytes) -> list[str]:
    return [f'{i:04x}: {data[i:i + 16].hex(" ")}' for i in range(0, len(data), 16)]


def pytest_assertrepr_compare(op: str, left: object, right: object) -> list[str] | None:
    if op != '==':
        return None

    if isinstance(left, bytes) and isinstance(right, bytes):
        return [
            'Comparing bytes:',
            '   diff:',
            *difflib.unified_diff(hexdump(left), hexdump(right), lineterm=''),
        ]

    if isinstance(left, str) and isinstance(right, str):
        return [
            'Comparing strings:',
            '   diff:',
            *difflib.unified_diff(left.splitlines(), right.splitlines(), lineterm=''),
            *[f'{left!r}', f'{right!r}'],
        ]

    return None
