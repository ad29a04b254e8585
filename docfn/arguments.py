
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError
from lark.lexer import Lexer

logger = logging.getLogger(__name__)

GRAMMAR = r"""
argument: [ELLIPSIS] NAME [typed]
typed: COLON TYPE

%declare ELLIPSIS NAME COLON TYPE
"""

ELLIPSIS = "..."

OPENERS = "([{<"
CLOSERS = ")]}>"


def _name_end(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] != ":" and not text[pos].isspace():
        pos += 1
    return pos


def split_arguments(raw: Optional[str], balanced: bool = True) -> List[str]:
    """Split a raw argument list into trimmed fragments.

    With ``balanced`` only top-level commas separate arguments, so types like
    ``Record<string, number>`` stay whole. Without it every comma splits.
    """
    if not raw or not raw.strip():
        return []
    if not balanced:
        return [part.strip() for part in raw.split(",")]

    parts, depth, start = [], 0, 0
    for i, ch in enumerate(raw):
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS and depth > 0:
            # the ">" of an arrow "=>" is not a bracket
            if ch == ">" and i > 0 and raw[i - 1] == "=":
                continue
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(raw[start:i].strip())
            start = i + 1
    parts.append(raw[start:].strip())
    return parts


def tokenize_argument(fragment: str) -> Iterator[Token]:
    pos = 0
    # a bare "..." is a name, not a collect marker
    if fragment.startswith(ELLIPSIS) and _name_end(fragment, len(ELLIPSIS)) > len(ELLIPSIS):
        yield Token("ELLIPSIS", ELLIPSIS)
        pos = len(ELLIPSIS)

    end = _name_end(fragment, pos)
    if end == pos:
        if fragment[pos:]:
            yield Token("TEXT", fragment[pos:])
        return
    yield Token("NAME", fragment[pos:end])

    rest = fragment[end:]
    after = rest.lstrip()
    if after.startswith(":"):
        yield Token("COLON", ":")
        type_ = after[1:].strip()
        if type_:
            yield Token("TYPE", type_)
        return
    if rest:
        yield Token("TEXT", rest)


class ArgumentLexer(Lexer):
    def __init__(self, lexer_conf):
        pass

    def lex(self, data):
        return tokenize_argument(data)


parser = Lark(GRAMMAR, start="argument", parser="lalr", lexer=ArgumentLexer, maybe_placeholders=True)


@dataclass(frozen=True)
class ParsedArgument:
    name: str
    type: Optional[str] = None
    collect: bool = False


@dataclass(frozen=True)
class UnparsedArgument:
    text: str


ArgumentResult = Union[ParsedArgument, UnparsedArgument]


@v_args(inline=True)
class ArgumentBuilder(Transformer):
    def typed(self, colon, type_):
        return str(type_)

    def argument(self, ellipsis, name, type_):
        return ParsedArgument(name=str(name), type=type_, collect=ellipsis is not None)


def parse_argument(fragment: str) -> ArgumentResult:
    try:
        tree = parser.parse(fragment)
    except LarkError:
        logger.debug("argument fragment %r kept verbatim", fragment)
        return UnparsedArgument(fragment)
    return ArgumentBuilder().transform(tree)


def parse_arguments(raw: Optional[str], balanced: bool = True) -> List[ArgumentResult]:
    return [parse_argument(fragment) for fragment in split_arguments(raw, balanced)]
