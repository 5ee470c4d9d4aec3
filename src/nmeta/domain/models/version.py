"""Version number splitting shared by the parser and the metadata model."""

import re

VERSION_DELIMITER = "."
ZERO_VERSION = "0.0.0"

_NUMBER = re.compile(r"[0-9]+")


def split_version_numbers(version: str) -> tuple[int, int, int]:
    """Split ``major.minor.patch`` into integers.

    Absent positions default to 0 and extra ones are ignored. Every position that
    is read must consist of ASCII digits only: no sign, whitespace or underscores.

    Raises:
        ValueError: If a position that is read is not a plain number.
    """
    parts = version.split(VERSION_DELIMITER)
    numbers = [0, 0, 0]
    for index, part in enumerate(parts[:3]):
        if not _NUMBER.fullmatch(part):
            raise ValueError(f"version part {part!r} is not a number")
        numbers[index] = int(part)
    return numbers[0], numbers[1], numbers[2]
