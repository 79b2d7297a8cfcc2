"""Data structures for properties-loader."""

import re

from .exceptions import PropertyValueError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

# Decimal or 0x-prefixed hexadecimal, with an optional sign
INTEGER_PATTERN = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)")

# Decimal floating point with optional exponent, or inf, infinity and nan in any case
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?|[nN][aA][nN])"
)

TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Properties(dict[str, str]):
    """Decoded properties, keyed by property name.

    A plain ``dict`` with typed lookups on top. Each ``get_*`` accessor
    returns ``default`` when the key is missing and raises
    :class:`PropertyValueError` when the stored value does not convert.
    """

    def get_string(self, key: str, default: str) -> str:
        return self.get(key, default)

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key)
        if value is None:
            return default
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise PropertyValueError(key, value, "bool")

    def get_int(self, key: str, default: int) -> int:
        """Look up a signed 64-bit integer (decimal or 0x hexadecimal)."""
        value = self.get(key)
        if value is None:
            return default
        number = _parse_integer(key, value, "int64")
        if not INT64_MIN <= number <= INT64_MAX:
            raise PropertyValueError(key, value, "int64")
        return number

    def get_uint(self, key: str, default: int) -> int:
        """Look up an unsigned 64-bit integer (decimal or 0x hexadecimal)."""
        value = self.get(key)
        if value is None:
            return default
        if value.startswith(("+", "-")):
            raise PropertyValueError(key, value, "uint64")
        number = _parse_integer(key, value, "uint64")
        if number > UINT64_MAX:
            raise PropertyValueError(key, value, "uint64")
        return number

    def get_float(self, key: str, default: float) -> float:
        value = self.get(key)
        if value is None:
            return default
        if not FLOAT_PATTERN.fullmatch(value):
            raise PropertyValueError(key, value, "float")
        return float(value)


def _parse_integer(key: str, value: str, expected: str) -> int:
    match = INTEGER_PATTERN.fullmatch(value)
    if not match:
        raise PropertyValueError(key, value, expected)

    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        number = int(digits[2:], 16)
    else:
        number = int(digits, 10)
    return -number if sign == "-" else number
