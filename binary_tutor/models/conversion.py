"""Data models for conversions and conversion history."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from binary_tutor.exceptions import ValidationError


class Direction(Enum):
    """Direction of a conversion, valued by its short history label."""

    BINARY_TO_DECIMAL = "B→D"
    DECIMAL_TO_BINARY = "D→B"

    @property
    def source_name(self) -> str:
        return "binary" if self is Direction.BINARY_TO_DECIMAL else "decimal"

    @property
    def target_name(self) -> str:
        return "decimal" if self is Direction.BINARY_TO_DECIMAL else "binary"


class ConversionErrorKind(Enum):
    """Why a conversion attempt was rejected."""

    EMPTY_INPUT = "empty_input"
    INVALID_DIGITS = "invalid_digits"


_ERROR_MESSAGES = {
    (Direction.BINARY_TO_DECIMAL, ConversionErrorKind.EMPTY_INPUT): "Please enter a binary number.",
    (
        Direction.BINARY_TO_DECIMAL,
        ConversionErrorKind.INVALID_DIGITS,
    ): "Invalid binary number. Only 0 and 1 are allowed.",
    (Direction.DECIMAL_TO_BINARY, ConversionErrorKind.EMPTY_INPUT): "Please enter a decimal number.",
    (
        Direction.DECIMAL_TO_BINARY,
        ConversionErrorKind.INVALID_DIGITS,
    ): "Invalid decimal number. Only digits are allowed.",
}


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single conversion attempt.

    A successful result carries the converted value and the explanation
    trace. A failed one carries only the error kind; value and steps
    are left empty.
    """

    direction: Direction
    input: str
    value: str = ""
    steps: tuple[str, ...] = field(default_factory=tuple)
    error: ConversionErrorKind | None = None

    @classmethod
    def failure(cls, direction: Direction, raw: str, kind: ConversionErrorKind) -> "ConversionResult":
        return cls(direction=direction, input=raw, error=kind)

    @property
    def ok(self) -> bool:
        """Check if the conversion succeeded."""
        return self.error is None

    @property
    def error_message(self) -> str:
        """Human-readable description of the error, or empty string on success."""
        if self.error is None:
            return ""
        return _ERROR_MESSAGES[(self.direction, self.error)]

    def __str__(self) -> str:
        if self.ok:
            return f"{self.direction.source_name} {self.input} = {self.direction.target_name} {self.value}"
        return f"ConversionResult({self.direction.value}, error={self.error.value})"


@dataclass(frozen=True)
class ConversionRecord:
    """A single entry of the conversion history."""

    id: int
    direction: Direction
    input: str
    output: str

    def __post_init__(self):
        if not self.input or not self.output:
            raise ValidationError("History records need both an input and an output")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "type": self.direction.value,
            "input": self.input,
            "output": self.output,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversionRecord":
        """Build a record from its stored JSON shape.

        Raises:
            KeyError: If a field is missing
            ValueError: If the direction label is unknown
            TypeError: If ``data`` is not a mapping or a field has the wrong type
            ValidationError: If input or output is empty
        """
        record_id = data["id"]
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise TypeError(f"Record id must be an integer, got {record_id!r}")
        input_text = data["input"]
        output_text = data["output"]
        if not isinstance(input_text, str) or not isinstance(output_text, str):
            raise TypeError("Record input and output must be strings")
        return cls(
            id=record_id,
            direction=Direction(data["type"]),
            input=input_text,
            output=output_text,
        )

    def __str__(self) -> str:
        return f"[{self.direction.value}] {self.input} → {self.output}"
