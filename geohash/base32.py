from geohash.errors import InvalidHashCharacter

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters


def char_of(value: int) -> str:
    """Map a 5-bit value (0-31) to its base32 character."""
    return BASE32[value]


def value_of(char: str) -> int:
    """Map a base32 character back to its 5-bit value.

    The ranges skip the letters a, i, l and o, which are not part of the
    alphabet.

    Raises:
        InvalidHashCharacter: if ``char`` is not in the alphabet.
    """
    ordinal = ord(char)
    if 48 <= ordinal <= 57:  # 0-9
        return ordinal - 48
    elif 98 <= ordinal <= 104:  # b-h
        return ordinal - 88
    elif 106 <= ordinal <= 107:  # j-k
        return ordinal - 89
    elif 109 <= ordinal <= 110:  # m-n
        return ordinal - 90
    elif 112 <= ordinal <= 122:  # p-z
        return ordinal - 91
    raise InvalidHashCharacter(char)
