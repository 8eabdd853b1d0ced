"""Cell value value object."""

from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError
from ..value_object import ValueObject


class CellValueParseError(ValidationError):
    """Raised when text cannot be parsed into a cell value."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse cell value '{text}': {reason}", field="value", value=text)
        self.text = text
        self.reason = reason


@dataclass(frozen=True)
class CellValue(ValueObject):
    """
    Optional numeric content of a column cell.

    None represents a blank cell. Integers are widened to float so that
    CellValue(1) == CellValue(1.0).
    """

    value: float | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, int | float):
            raise ValidationError("Cell value must be a number or None", field="value")
        object.__setattr__(self, "value", float(self.value))

    @property
    def is_blank(self) -> bool:
        return self.value is None

    @classmethod
    def blank(cls) -> Self:
        return cls(None)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a cell value from user text.

        Legacy import path kept for spreadsheet-style input. Surrounding
        whitespace, including the full-width space U+3000, is ignored and
        blank text yields a blank cell.

        Raises:
            CellValueParseError: If the text is not a float literal
        """
        stripped = text.strip()
        if not stripped:
            return cls(None)
        try:
            return cls(float(stripped))
        except ValueError as e:
            raise CellValueParseError(text, str(e)) from e
