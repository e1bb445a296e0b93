from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    EmptyAttribute = "EmptyAttribute"
    EmptyFlag = "EmptyFlag"


MESSAGES = {
    ErrorKind.EmptyAttribute: "'=' with no attribute name before it",
    ErrorKind.EmptyFlag: "'+' with no flag name after it",
}


@dataclass
class ArgumentError(Exception):
    """Base class for all tokenizer errors"""
    kind: ErrorKind
    token: str = ""
    pos: Optional[int] = None

    def __str__(self) -> str:
        msg = f"{self.kind.value}: {MESSAGES[self.kind]}"
        if self.pos is None:
            return f"{msg} in {self.token!r}"
        return f"{msg} in {self.token!r} at {self.pos}"


@dataclass
class EmptyAttributeError(ArgumentError):
    kind: ErrorKind = field(default=ErrorKind.EmptyAttribute, init=False)
    token: str = ""
    pos: Optional[int] = None


@dataclass
class EmptyFlagError(ArgumentError):
    kind: ErrorKind = field(default=ErrorKind.EmptyFlag, init=False)
    token: str = ""
    pos: Optional[int] = None
