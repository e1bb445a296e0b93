from dataclasses import dataclass
from typing import Union


# =====================
# Arguments
# =====================

@dataclass(frozen=True)
class Operand:
    text: str


@dataclass(frozen=True)
class Attribute:
    name: str   # never empty
    value: str  # may be ""


@dataclass(frozen=True)
class Flag:
    name: str   # one char for short flags


Argument = Union[Operand, Attribute, Flag]


def describe(arg: Argument) -> str:
    if isinstance(arg, Operand):
        return f"Operand: `{arg.text}`"
    if isinstance(arg, Attribute):
        return f"Attribute `{arg.name}`: {arg.value}"
    if isinstance(arg, Flag):
        return f"Flag `{arg.name}`"
    raise TypeError(f"Unknown argument: {arg!r}")
