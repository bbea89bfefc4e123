"""
passwright.common
Immutable denylist of known-weak passwords, matched verbatim.
"""

import logging
from importlib import resources
from typing import FrozenSet, Iterable, Iterator, Optional

from .config import ConfigError
from .storage import read_text_lines

logger = logging.getLogger(__name__)

BUNDLED_WORDLIST = "common-passwords.txt"


class CommonPasswordSet:
    """Read-only set of common passwords. Lookups are exact and case-sensitive."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[str] = ()):
        self._entries: FrozenSet[str] = frozenset(e for e in entries if e)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CommonPasswordSet":
        return cls(line.rstrip("\r\n") for line in lines)

    @classmethod
    def from_path(cls, path: str) -> "CommonPasswordSet":
        common = cls(read_text_lines(path))
        logger.debug("Loaded %d common passwords from %s", len(common), path)
        return common

    @classmethod
    def default(cls) -> "CommonPasswordSet":
        text = resources.files("passwright.data").joinpath(BUNDLED_WORDLIST).read_text(encoding="utf-8")
        common = cls(text.splitlines())
        logger.debug("Loaded %d bundled common passwords", len(common))
        return common

    def __contains__(self, password: object) -> bool:
        return password in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def load_common_passwords(path: Optional[str] = None) -> CommonPasswordSet:
    if path:
        try:
            return CommonPasswordSet.from_path(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read common password list {path}: {e}") from e
    return CommonPasswordSet.default()
