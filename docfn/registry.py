
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArgumentDescription:
    name: str
    type: Optional[str] = None
    collect: bool = False     # rest parameter, "...name"
    description: Optional[str] = None


@dataclass(frozen=True)
class FunctionDescription:
    id: str                   # dedup key, receiver-qualified name
    name: str
    label: str
    args: Tuple[ArgumentDescription, ...] = field(default_factory=tuple)
    return_type: Optional[str] = None
    is_method: bool = False
    method_of: Optional[str] = None
    description: Optional[str] = None


class FunctionRegistry(Mapping):
    """Functions seen during one documentation pass, keyed by id.

    The first registration of an id is kept; later ones are ignored.
    """

    def __init__(self):
        self._functions: Dict[str, FunctionDescription] = {}

    def register(self, fn: FunctionDescription) -> Optional[str]:
        """Store ``fn`` and return its id, or None when the id is already known."""
        if fn.id in self._functions:
            logger.debug("function '%s' already registered, ignoring duplicate", fn.id)
            return None
        self._functions[fn.id] = fn
        return fn.id

    def get_fn(self, fn_id: str) -> FunctionDescription:
        if fn_id not in self._functions:
            raise KeyError(f"Unknown function '{fn_id}'")
        return self._functions[fn_id]

    def __getitem__(self, fn_id: str) -> FunctionDescription:
        return self.get_fn(fn_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def list_functions(self) -> List[dict]:
        return [function_to_dict(fn) for _, fn in sorted(self._functions.items())]


def argument_to_dict(arg: ArgumentDescription) -> Dict[str, Any]:
    return {"name": arg.name, "type": arg.type, "collect": arg.collect, "description": arg.description}


def function_to_dict(fn: FunctionDescription) -> Dict[str, Any]:
    return {
        "id": fn.id,
        "name": fn.name,
        "label": fn.label,
        "args": [argument_to_dict(a) for a in fn.args],
        "returnType": fn.return_type,
        "isMethod": fn.is_method,
        "methodOf": fn.method_of,
        "description": fn.description,
    }
