import sys
from typing import List, Optional, Sequence, TextIO

from .arguments import Argument, describe
from .tokenizer import parse_arguments


def tokenize(argv: Sequence[str]) -> List[Argument]:
    # argv[0] is the program name
    return parse_arguments(argv[1:])

def render(arguments: List[Argument]) -> List[str]:
    return [describe(a) for a in arguments]

def run(argv: Sequence[str], out: Optional[TextIO] = None) -> List[Argument]:
    if out is None:
        out = sys.stdout
    arguments = tokenize(argv)
    for line in render(arguments):
        print(line, file=out)
    return arguments
