
from collections.abc import Mapping, Sequence
from typing import Optional, Union

ParameterDescriptions = Union[Sequence, Mapping]


def resolve_description(descriptions: Optional[ParameterDescriptions], name: Optional[str], index: int) -> Optional[str]:
    """Description of the ``index``-th argument: by name first, then by position.

    A sequence only supports the positional lookup. A mapping may carry
    positional keys as ints or as digit strings. ``name=None`` skips the name
    lookup (used for fragments that failed to parse). Empty text is absent.
    """
    if descriptions is None:
        return None
    if isinstance(descriptions, str):
        raise TypeError("parameter descriptions must be a sequence or a mapping, not a string")

    if isinstance(descriptions, Mapping):
        found = descriptions.get(name) if name is not None else None
        if not found:
            found = descriptions.get(index) or descriptions.get(str(index))
        return found or None

    if 0 <= index < len(descriptions):
        return descriptions[index] or None
    return None
