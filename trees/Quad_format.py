import numbers

from trees.config import INDENT


def _num(value):
    # enteros tal cual, flotantes con el formato corto
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return f"{value:g}"


def format_node_line(node, depth=0):
    b = node.boundary
    line = f"{INDENT * depth}Node [{_num(b.x0)} {_num(b.y0)}] [{_num(b.x1)} {_num(b.y1)}] => ( "
    for handle in sorted(node.points):
        p = node.store.point(handle)
        line += f"[{_num(p[0])} {_num(p[1])}] "
    return line + ")"


def walk(node, depth=0):
    """Recorrido en preorden NW, NE, SE, SW; produce (profundidad, nodo).

    Usa una pila explícita, el árbol puede ser más profundo que el límite
    de recursión.
    """
    stack = [(depth, node)]
    while stack:
        d, n = stack.pop()
        yield d, n
        for child in reversed(n.children()):
            stack.append((d + 1, child))


def format_tree(node, depth=0):
    """Volcado de texto del subárbol, una línea por nodo.

    La profundidad se pasa en el recorrido, el nodo no la guarda. No
    modifica el árbol. Acepta un nodo o un QuadTree.
    """
    node = getattr(node, "root", node)
    return "\n".join(format_node_line(n, d) for d, n in walk(node, depth)) + "\n"
