"""Custom exceptions for properties-loader."""


class PropertiesError(Exception):
    """Base exception for properties-loader."""

    pass


class MalformedEscapeError(PropertiesError, ValueError):
    """Raised when a \\uXXXX escape is not followed by four hex digits."""

    def __init__(self, sequence: str, position: int) -> None:
        self.sequence = sequence
        self.position = position
        super().__init__(
            f"Malformed \\uXXXX encoding {sequence!r} at offset {position}"
        )


class PropertyValueError(PropertiesError, ValueError):
    """Raised when a stored value cannot be converted by a typed accessor."""

    def __init__(self, key: str, value: str, expected: str) -> None:
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"Property '{key}': cannot convert {value!r} to {expected}")
