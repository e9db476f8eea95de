"""Conversion result types for the roman converter package.

Every conversion returns a value instead of raising, so an interactive caller
can show a message without crashing. A result is either a success carrying the
converted value, or a failure carrying exactly one error and an empty value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ErrorKind(str, Enum):
    """Failure categories, listed in the order they are checked."""
    EMPTY_INPUT = "empty_input"
    TOO_MANY_REPEATS = "too_many_repeats"
    MALFORMED_FORMAT = "malformed_format"
    INVALID_SUBTRACTION = "invalid_subtraction"
    NOT_AN_INTEGER = "not_an_integer"
    NOT_POSITIVE = "not_positive"
    TOO_LARGE = "too_large"


@dataclass(frozen=True)
class ValidationIssue:
    """A single failed rule with the message to show."""
    kind: ErrorKind
    message: str


class ConversionSuccess(BaseModel):
    """Successful conversion.

    Attributes:
        value: Decimal integer (roman to decimal) or roman string
               (decimal to roman)
    """
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    value: Union[int, str]

    @property
    def ok(self) -> bool:
        return True

    @property
    def error(self) -> Optional[str]:
        return None


class ConversionFailure(BaseModel):
    """Failed conversion.

    Attributes:
        value: 0 for roman to decimal, "" for decimal to roman
        kind: Category of the failure
        error: Human-readable message
    """
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    value: Union[int, str]
    kind: ErrorKind
    error: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_issue(cls, issue: ValidationIssue, value: Union[int, str]) -> "ConversionFailure":
        return cls(value=value, kind=issue.kind, error=issue.message)


ConversionResult = Annotated[
    Union[ConversionSuccess, ConversionFailure],
    Field(discriminator="status"),
]

# Use TypeAdapter for Pydantic v2 parsing and dumping of the union
CONVERSION_RESULT_ADAPTER = TypeAdapter(ConversionResult)
