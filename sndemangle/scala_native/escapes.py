import string

from .definitions import (
    ESCAPE_CHAR,
    HIGH_SURROGATE_START,
    LOW_SURROGATE_START,
    OPERATOR_CODES,
    SURROGATE_END,
    UNICODE_ESCAPE,
    UNICODE_ESCAPE_WIDTH,
)

_CODE_TO_OPERATOR = {code: op for op, code in OPERATOR_CODES.items()}
# codes grouped by first letter, so decoding only tries plausible candidates
_CODES_BY_INITIAL = {}
for _code in sorted(_CODE_TO_OPERATOR):
    _CODES_BY_INITIAL.setdefault(_code[0], []).append(_code)


def _read_unicode(name, index):
    """Return the code unit of the `$uXXXX` escape at index and the index after it."""
    if not name.startswith(ESCAPE_CHAR + UNICODE_ESCAPE, index):
        return None, index
    start = index + 1 + len(UNICODE_ESCAPE)
    digits = name[start : start + UNICODE_ESCAPE_WIDTH]
    if len(digits) == UNICODE_ESCAPE_WIDTH and all(c in string.hexdigits for c in digits):
        return int(digits, 16), start + UNICODE_ESCAPE_WIDTH
    return None, index


def _is_high_surrogate(unit):
    return HIGH_SURROGATE_START <= unit < LOW_SURROGATE_START


def _is_low_surrogate(unit):
    return LOW_SURROGATE_START <= unit <= SURROGATE_END


def _decode_unicode(name, index):
    unit, next_index = _read_unicode(name, index)
    if unit is None or _is_low_surrogate(unit):
        return None, index
    if _is_high_surrogate(unit):
        # characters beyond the BMP are escaped as a UTF-16 surrogate pair
        low, after_pair = _read_unicode(name, next_index)
        if low is None or not _is_low_surrogate(low):
            return None, index
        return chr(0x10000 + ((unit - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)), after_pair
    return chr(unit), next_index


def _encode_unicode(unit):
    return "%s%s%0*X" % (ESCAPE_CHAR, UNICODE_ESCAPE, UNICODE_ESCAPE_WIDTH, unit)


def decode_name(name: str) -> str:
    """Replace `$code` operator and `$uXXXX` escapes with their glyphs.

    A `$` that does not start a known escape is kept as is, which covers
    module suffixes (`Foo$`) and synthetic names (`$anonfun$1`).
    """
    if ESCAPE_CHAR not in name:
        return name
    decoded = []
    index = 0
    while index < len(name):
        char = name[index]
        if char == ESCAPE_CHAR and index + 1 < len(name):
            replaced = False
            for code in _CODES_BY_INITIAL.get(name[index + 1], []):
                if name.startswith(code, index + 1):
                    decoded.append(_CODE_TO_OPERATOR[code])
                    index += 1 + len(code)
                    replaced = True
                    break
            if not replaced and name.startswith(UNICODE_ESCAPE, index + 1):
                glyph, next_index = _decode_unicode(name, index)
                if glyph is not None:
                    decoded.append(glyph)
                    index = next_index
                    replaced = True
            if replaced:
                continue
        decoded.append(char)
        index += 1
    return "".join(decoded)


def _is_identifier_part(char):
    return char.isalnum() or char in "_$"


def encode_name(name: str) -> str:
    """Inverse of decode_name for names built from identifier characters and operators."""
    encoded = []
    for char in name:
        if char in OPERATOR_CODES:
            encoded.append(ESCAPE_CHAR + OPERATOR_CODES[char])
        elif _is_identifier_part(char):
            encoded.append(char)
        elif HIGH_SURROGATE_START <= ord(char) <= SURROGATE_END:
            raise ValueError(f"lone surrogate {char!r} has no escape in the mangling scheme")
        elif ord(char) <= 0xFFFF:
            encoded.append(_encode_unicode(ord(char)))
        else:
            offset = ord(char) - 0x10000
            encoded.append(_encode_unicode(HIGH_SURROGATE_START + (offset >> 10)))
            encoded.append(_encode_unicode(LOW_SURROGATE_START + (offset & 0x3FF)))
    return "".join(encoded)
