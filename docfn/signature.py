
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError
from lark.lexer import Lexer

logger = logging.getLogger(__name__)

GRAMMAR = r"""
signature: [receiver] NAME [params] [returns]
receiver: [RECEIVER] DOT
params: LPAR ARGS RPAR
returns: COLON TYPE

%declare RECEIVER DOT NAME LPAR ARGS RPAR COLON TYPE
"""

# characters that end a receiver / a name token
RECEIVER_STOP = ". ("
NAME_STOP = "("


def _scan(text: str, pos: int, stop: str) -> int:
    while pos < len(text) and text[pos] not in stop and not text[pos].isspace():
        pos += 1
    return pos


def _name_end(text: str, pos: int) -> int:
    # "std::move(x)" keeps its colons; "length: number" stops at the colon
    end = _scan(text, pos, NAME_STOP)
    if end < len(text) and text[end] == "(":
        return end
    colon = text.find(":", pos, end)
    return colon if colon != -1 else end


def _matching_paren(text: str, open_at: int) -> Optional[int]:
    depth = 0
    for i in range(open_at, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return None


def tokenize_signature(text: str) -> Iterator[Token]:
    """Split `[Receiver.]name[(args)][: ReturnType]` into grammar tokens.

    Text that fits nowhere is emitted as a TEXT token, which the grammar
    rejects.
    """
    pos = 0
    head = _scan(text, 0, RECEIVER_STOP)
    if head < len(text) and text[head] == "." and _name_end(text, head + 1) > head + 1:
        if head > 0:
            yield Token("RECEIVER", text[:head])
        yield Token("DOT", ".")
        pos = head + 1

    end = _name_end(text, pos)
    if end == pos:
        if text[pos:]:
            yield Token("TEXT", text[pos:])
        return
    yield Token("NAME", text[pos:end])
    pos = end

    if pos < len(text) and text[pos] == "(":
        close = _matching_paren(text, pos)
        if close is None:
            yield Token("TEXT", text[pos:])
            return
        yield Token("LPAR", "(")
        yield Token("ARGS", text[pos + 1:close])
        yield Token("RPAR", ")")
        pos = close + 1

    rest = text[pos:]
    after = rest.lstrip()
    if after.startswith(":"):
        yield Token("COLON", ":")
        type_ = after[1:].lstrip()
        if type_:
            kind = "TEXT" if any(c.isspace() for c in type_) else "TYPE"
            yield Token(kind, type_)
        return
    if rest:
        yield Token("TEXT", rest)


class SignatureLexer(Lexer):
    def __init__(self, lexer_conf):
        pass

    def lex(self, data):
        return tokenize_signature(data)


parser = Lark(GRAMMAR, start="signature", parser="lalr", lexer=SignatureLexer, maybe_placeholders=True)


@dataclass(frozen=True)
class ParsedSignature:
    name: str
    is_method: bool = False
    method_of: Optional[str] = None
    raw_args: Optional[str] = None
    return_type: Optional[str] = None

    @property
    def identifier(self) -> str:
        return function_id(self.name, self.is_method, self.method_of)


@dataclass(frozen=True)
class UnparsedSignature:
    text: str


SignatureResult = Union[ParsedSignature, UnparsedSignature]


def function_id(name: str, is_method: bool, method_of: Optional[str]) -> str:
    # also used as the display label
    if is_method:
        return f"{method_of or ''}.{name}"
    return name


@v_args(inline=True)
class SignatureBuilder(Transformer):
    def receiver(self, owner, dot):
        # "" marks a leading dot with no receiver name
        return str(owner) if owner is not None else ""

    def params(self, lpar, args, rpar):
        return str(args)

    def returns(self, colon, type_):
        return str(type_)

    def signature(self, receiver, name, params, returns):
        return ParsedSignature(
            name=str(name),
            is_method=receiver is not None,
            method_of=receiver or None,
            raw_args=params,
            return_type=returns,
        )


def parse_signature(text: str) -> SignatureResult:
    if not isinstance(text, str):
        raise TypeError(f"signature must be a string, got {type(text).__name__}")
    try:
        tree = parser.parse(text)
    except LarkError as e:
        logger.debug("unparseable signature %r: %s", text, e)
        return UnparsedSignature(text)
    return SignatureBuilder().transform(tree)
