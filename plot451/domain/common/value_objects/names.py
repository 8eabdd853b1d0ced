"""Name value objects for directories, columns and tables."""

from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import ValidationError
from ..value_object import ValueObject


class EmptyNameError(ValidationError):
    """Raised when a name is empty after trimming."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} cannot be empty", field="name")
        self.kind = kind


class NameTooLongError(ValidationError):
    """Raised when a name exceeds its maximum length after trimming."""

    def __init__(self, kind: str, max_length: int, value: str) -> None:
        super().__init__(
            f"{kind} cannot be longer than {max_length} characters",
            field="name",
            value=value,
        )
        self.kind = kind
        self.max_length = max_length


@dataclass(frozen=True)
class _TrimmedName(ValueObject):
    """Non-empty name, stored without surrounding whitespace."""

    value: str

    kind: ClassVar[str] = "Name"
    max_length: ClassVar[int | None] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(f"{self.kind} must be a string", field="name")
        trimmed = self.value.strip()
        if not trimmed:
            raise EmptyNameError(self.kind)
        if self.max_length is not None and len(trimmed) > self.max_length:
            raise NameTooLongError(self.kind, self.max_length, trimmed)
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ColumnName(_TrimmedName):
    """Name of a column."""

    kind: ClassVar[str] = "Column name"


@dataclass(frozen=True)
class ColumnDirectoryName(_TrimmedName):
    """Name of a column directory."""

    kind: ClassVar[str] = "Directory name"


@dataclass(frozen=True)
class TableName(_TrimmedName):
    """Name of a table, bounded to 100 characters."""

    kind: ClassVar[str] = "Table name"
    max_length: ClassVar[int | None] = 100
