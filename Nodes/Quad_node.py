from Nodes.Boundary_Q import Boundary
from Nodes.Errors import InvariantViolationError
from trees.logger import logger


class QuadNode:
    """Nodo del quad tree.

    Es hoja (sin hijos, puede tener hasta `capacity` handles) o interno
    (los cuatro hijos, ningún handle), nunca una mezcla. El paso de hoja a
    interno ocurre una sola vez, en `subdivide`.

    Hay dos órdenes fijos para los puntos que caen en un borde compartido:
    la inserción prueba NW, NE, SW, SE y la redistribución al dividir prueba
    NW, NE, SE, SW. Son distintos a propósito, no unificarlos.
    """

    def __init__(self, boundary, store, capacity):
        self.boundary = Boundary.of(boundary)
        self.store = store
        self.capacity = capacity
        self.points = []

        # hijos
        self.northwest = None
        self.northeast = None
        self.southwest = None
        self.southeast = None

    @property
    def divided(self):
        return self.northwest is not None

    def children(self):
        """Hijos en el orden de recorrido del volcado: NW, NE, SE, SW."""
        if not self.divided:
            return ()
        return (self.northwest, self.northeast, self.southeast, self.southwest)

    def contains(self, handle):
        return self.boundary.contains(self.store.point(handle))

    def insert(self, handle):
        """Inserta el handle en la hoja que le corresponde.

        Baja en un ciclo y no por recursión: dos puntos muy cercanos a cero
        pueden necesitar más de mil niveles. Si la hoja destino está llena
        se divide y se sigue bajando.
        """
        point = self.store.point(handle)
        if not self.boundary.contains(point):
            return False

        node = self
        while True:
            if node.divided:
                node = node._child_for(point, handle)
                continue

            if handle in node.points:
                return True

            if len(node.points) < node.capacity:
                node.points.append(handle)
                return True

            node.subdivide()

    def _child_for(self, point, handle):
        # orden de inserción: NW, NE, SW, SE
        for child in (self.northwest, self.northeast, self.southwest, self.southeast):
            if child.boundary.contains(point):
                return child

        raise InvariantViolationError(
            f"El punto {handle} está en {self.boundary} pero ningún cuadrante lo aceptó")

    def subdivide(self):
        nw, ne, se, sw = self.boundary.quadrants()
        logger.debug("split %r en el centro %s (%d puntos)",
                     self.boundary, nw.lower_right, len(self.points))

        self.northwest = QuadNode(nw, self.store, self.capacity)
        self.northeast = QuadNode(ne, self.store, self.capacity)
        self.southeast = QuadNode(se, self.store, self.capacity)
        self.southwest = QuadNode(sw, self.store, self.capacity)

        # redistribuir: NW, NE, SE, SW; los hijos están vacíos, no se dividen aquí
        for handle in sorted(self.points):
            if self.northwest.insert(handle): continue
            if self.northeast.insert(handle): continue
            if self.southeast.insert(handle): continue
            if self.southwest.insert(handle): continue

            raise InvariantViolationError(
                f"El punto {handle} no cupo en ningún cuadrante de {self.boundary}")

        self.points = []

    def __repr__(self):
        kind = "interno" if self.divided else f"hoja({len(self.points)})"
        return f"QuadNode({self.boundary!r}, {kind})"
