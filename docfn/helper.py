
import logging
from typing import Optional, Tuple

from .arguments import ParsedArgument, parse_arguments
from .config import DocConfig
from .describe import ParameterDescriptions, resolve_description
from .emitter import render_declaration
from .registry import ArgumentDescription, FunctionDescription, FunctionRegistry
from .signature import ParsedSignature, parse_signature

logger = logging.getLogger(__name__)


def build_function(parsed: ParsedSignature, description: Optional[str] = None,
                   parameter_descriptions: Optional[ParameterDescriptions] = (),
                   balanced: bool = True) -> FunctionDescription:
    args = []
    for i, arg in enumerate(parse_arguments(parsed.raw_args, balanced)):
        if isinstance(arg, ParsedArgument):
            args.append(ArgumentDescription(
                name=arg.name,
                type=arg.type,
                collect=arg.collect,
                description=resolve_description(parameter_descriptions, arg.name, i),
            ))
        else:
            args.append(ArgumentDescription(
                name=arg.text,
                description=resolve_description(parameter_descriptions, None, i),
            ))

    return FunctionDescription(
        id=parsed.identifier,
        name=parsed.name,
        label=parsed.identifier,
        args=tuple(args),
        return_type=parsed.return_type,
        is_method=parsed.is_method,
        method_of=parsed.method_of,
        description=description or None,
    )


class DocHelper:
    """Declares documented functions and collects them for autocompletion.

    One helper (and its registry) per documentation pass. Pass a registry in
    to share it between helpers.
    """

    def __init__(self, registry: Optional[FunctionRegistry] = None, config: Optional[DocConfig] = None):
        self.registry = registry if registry is not None else FunctionRegistry()
        self.config = config or DocConfig()

    @property
    def functions(self) -> FunctionRegistry:
        return self.registry

    def describe(self, signature: str, description: Optional[str] = None,
                 parameter_descriptions: Optional[ParameterDescriptions] = ()) -> Optional[FunctionDescription]:
        """Structured description of ``signature`` without registering it."""
        parsed = parse_signature(signature)
        if not isinstance(parsed, ParsedSignature):
            return None
        return build_function(parsed, description, parameter_descriptions, self.config.balanced_split)

    def declare(self, signature: str, description: Optional[str] = None,
                parameter_descriptions: Optional[ParameterDescriptions] = ()) -> Tuple[str, Optional[str]]:
        """Register ``signature`` and render it; returns ``(markup, id or None)``.

        Only the first declaration of an id gets the id anchor and enters the
        registry. An unparseable signature is rendered as plain text.
        """
        fn = self.describe(signature, description, parameter_descriptions)
        if fn is None:
            logger.debug("signature %r rendered without declaration", signature)
            return render_declaration(signature, config=self.config), None

        identifier = self.registry.register(fn)
        return render_declaration(signature, identifier, description, self.config), identifier

    def fn(self, signature: str, description: Optional[str] = None,
           parameter_descriptions: Optional[ParameterDescriptions] = ()) -> str:
        markup, _ = self.declare(signature, description, parameter_descriptions)
        return markup
