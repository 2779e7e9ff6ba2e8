"""Errors raised while converting temporal values."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when text does not match the expected date or time layout."""

    def __init__(self, text: str, layout: str) -> None:
        super().__init__(f'cannot parse "{text}" as {layout}')
        self.text = text
        self.layout = layout


class ScanError(TypeError):
    """Raised when a storage value has a shape the target type cannot read."""

    def __init__(self, target: str, value: object) -> None:
        self.target = target
        self.value_type = type(value).__name__
        super().__init__(f"unsupported type for {target}: {self.value_type}")
