class QuadTreeError(Exception):
    """Base de todos los errores del quad tree."""


class EmptyRangeError(QuadTreeError, ValueError):
    """Se intentó construir el árbol a partir de un rango vacío."""


class BoundaryError(QuadTreeError, ValueError):
    pass


class DegenerateBoundaryError(BoundaryError):
    """Ancho o alto igual a cero."""


class InvertedBoundaryError(BoundaryError):
    """La esquina superior izquierda no es menor que la inferior derecha."""


class InvariantViolationError(QuadTreeError, RuntimeError):
    """Un punto aceptado por un nodo no fue aceptado por ninguno de sus hijos.

    Indica un defecto en la aritmética de límites/centro; nunca se debe
    ignorar porque el punto se perdería.
    """
