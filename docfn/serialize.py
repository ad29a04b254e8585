
from .registry import FunctionDescription


def function_to_pretty(fn: FunctionDescription, indent: str = "  ") -> str:
    head = f"Method({fn.label})" if fn.is_method else f"Function({fn.label})"
    lines = [head]
    if fn.method_of:
        lines.append(f"{indent}of: {fn.method_of}")
    for i, a in enumerate(fn.args):
        rest = "..." if a.collect else ""
        typ = f": {a.type}" if a.type else ""
        line = f"{indent}arg[{i}]: {rest}{a.name}{typ}"
        if a.description:
            line += f"  # {a.description}"
        lines.append(line)
    if fn.return_type:
        lines.append(f"{indent}returns: {fn.return_type}")
    if fn.description:
        lines.append(f"{indent}doc: {fn.description}")
    return "\n".join(lines)
