"""Printers for dharma expression trees.

`to_source` renders a tree back into canonical source text, which parses to
an equal tree. `dump` renders a readable multi-line tree for debugging and
for the `parse` CLI command. Both walk the tree with an explicit stack, so
any tree the parser accepts can be printed.

Examples:
    to_source(tree)   # '((1+2)*4)'
    print(dump(tree))
"""

from typing import List, Tuple, Union

from ..ir import Digit, Parenthesized, Expr


def to_source(expr: Expr) -> str:
    parts: List[str] = []
    # Pending items are nodes or (text,) literals, popped in source order
    pending: List[Union[Expr, Tuple[str]]] = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, tuple):
            parts.append(item[0])
        elif isinstance(item, Digit):
            parts.append(str(item.value))
        elif isinstance(item, Parenthesized):
            pending.extend(((")",), item.right, (item.op.symbol,), item.left, ("(",)))
        else:
            raise TypeError(f"Unsupported node: {type(item).__name__}")
    return "".join(parts)


def dump(expr: Expr, indent: int = 0) -> str:
    """Pretty print an expression tree, two spaces per nesting level."""
    lines: List[str] = []
    pending: List[Tuple[Expr, int]] = [(expr, indent)]
    while pending:
        node, level = pending.pop()
        pad = "  " * level
        if isinstance(node, Digit):
            lines.append(f"{pad}Digit({node.value})")
        elif isinstance(node, Parenthesized):
            lines.append(f"{pad}Parenthesized({node.op.name})")
            pending.append((node.right, level + 1))
            pending.append((node.left, level + 1))
        else:
            raise TypeError(f"Unsupported node: {type(node).__name__}")
    return "\n".join(lines)
