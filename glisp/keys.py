"""Key-name resolution and nearest-name suggestions for ``@name`` literals."""

from types import MappingProxyType
from typing import Mapping, Optional

from .keycodes import KEY_CODES

MAX_SUGGESTIONS = 2


def distance(a: str, b: str) -> int:
    """Levenshtein edit distance between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


class KeyTable:
    """Read-only, case-sensitive mapping of key names to key codes."""

    __slots__ = ("_codes",)

    def __init__(self, codes: Mapping[str, int]):
        self._codes = MappingProxyType(dict(codes))

    def resolve(self, name: str) -> Optional[int]:
        return self._codes.get(name)

    def suggest(self, name: str, limit: int = MAX_SUGGESTIONS) -> tuple[str, ...]:
        """Return up to `limit` known names closest to `name`.

        sorted() is stable, so names at equal distance keep table order.
        """
        ranked = sorted(self._codes, key=lambda known: distance(name, known))
        return tuple(ranked[:limit])


DEFAULT_KEYS = KeyTable(KEY_CODES)
