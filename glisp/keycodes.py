"""Key names accepted in ``@name`` literals, mapped to SDL2 keycodes.

Order matters: suggestions for misspelled names break distance ties by the
position of the name in this table.
"""

_SCANCODE_MASK = 1 << 30


def _scancode(n: int) -> int:
    return n | _SCANCODE_MASK


KEY_CODES: dict[str, int] = {
    "up": _scancode(82),
    "down": _scancode(81),
    "left": _scancode(80),
    "right": _scancode(79),
    "return": 13,
    "escape": 27,
    "backspace": 8,
    "tab": 9,
    "space": 32,
    "delete": 127,
    "insert": _scancode(73),
    "home": _scancode(74),
    "pageup": _scancode(75),
    "end": _scancode(77),
    "pagedown": _scancode(78),
    "capslock": _scancode(57),
    "lctrl": _scancode(224),
    "lshift": _scancode(225),
    "lalt": _scancode(226),
    "lgui": _scancode(227),
    "rctrl": _scancode(228),
    "rshift": _scancode(229),
    "ralt": _scancode(230),
    "rgui": _scancode(231),
}

KEY_CODES.update({chr(c): c for c in range(ord("a"), ord("z") + 1)})
KEY_CODES.update({str(d): ord("0") + d for d in range(10)})
KEY_CODES.update({f"f{n}": _scancode(57 + n) for n in range(1, 13)})
