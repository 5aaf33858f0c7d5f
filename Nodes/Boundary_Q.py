import numbers

from Nodes.Errors import DegenerateBoundaryError, InvertedBoundaryError


def midpoint(a, b):
    """Punto medio de dos componentes.

    Con componentes enteras la división trunca hacia cero (como la división
    entera de C), con flotantes es la división normal.
    """
    s = a + b
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        q = abs(s) // 2
        return q if s >= 0 else -q
    return s / 2


class Boundary:
    def __init__(self, upper_left, lower_right):
        # (x0, y0) = esquina superior izquierda, (x1, y1) = inferior derecha
        self.x0, self.y0 = upper_left[0], upper_left[1]
        self.x1, self.y1 = lower_right[0], lower_right[1]
        self.check()

    @classmethod
    def of(cls, boundary):
        if isinstance(boundary, Boundary):
            return boundary
        upper_left, lower_right = boundary
        return cls(upper_left, lower_right)

    @property
    def upper_left(self):
        return (self.x0, self.y0)

    @property
    def lower_right(self):
        return (self.x1, self.y1)

    @property
    def width(self):
        return self.x1 - self.x0

    @property
    def height(self):
        return self.y1 - self.y0

    def check(self):
        if self.x0 == self.x1 or self.y0 == self.y1:
            raise DegenerateBoundaryError(
                f"Límite degenerado: [{self.x0} {self.y0}] [{self.x1} {self.y1}]")
        # escrito en positivo para que un NaN también falle
        if not (self.x0 < self.x1 and self.y0 < self.y1):
            raise InvertedBoundaryError(
                f"Orden de las esquinas no respetado: [{self.x0} {self.y0}] [{self.x1} {self.y1}]")

    def contains(self, point):
        # cerrado en los cuatro lados
        return (self.x0 <= point[0] <= self.x1 and
                self.y0 <= point[1] <= self.y1)

    def center(self):
        return (midpoint(self.x0, self.x1), midpoint(self.y0, self.y1))

    def quadrants(self):
        """Devuelve los límites (nw, ne, se, sw) que comparten el centro como esquina."""
        cx, cy = self.center()
        nw = Boundary((self.x0, self.y0), (cx, cy))
        ne = Boundary((cx, self.y0), (self.x1, cy))
        se = Boundary((cx, cy), (self.x1, self.y1))
        sw = Boundary((self.x0, cy), (cx, self.y1))
        return nw, ne, se, sw

    def __eq__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        return (self.upper_left, self.lower_right) == (other.upper_left, other.lower_right)

    def __hash__(self):
        return hash((self.upper_left, self.lower_right))

    def __repr__(self):
        return f"Boundary({self.upper_left}, {self.lower_right})"
