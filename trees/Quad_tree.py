from Nodes.Boundary_Q import Boundary
from Nodes.Point_store import PointStore
from Nodes.Quad_node import QuadNode
from trees.Quad_format import format_tree, walk
from trees.config import DEFAULT_CAPACITY
from trees.logger import logger


class QuadTree:
    """Quad tree no intrusivo sobre un PointStore.

    El árbol guarda solo handles al store; el store tiene que seguir vivo
    mientras se use el árbol.
    """

    def __init__(self, boundary, points=None, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"La capacidad debe ser al menos 1, se recibió {capacity}")
        self.capacity = capacity
        self.store = PointStore() if points is None else PointStore.wrap(points)
        self.root = QuadNode(Boundary.of(boundary), self.store, capacity)
        # handles aceptados; un handle en un borde compartido podría caer en
        # otra hoja si se vuelve a insertar después de un split
        self._accepted = set()
        logger.debug("QuadTree %r, capacidad %d", self.root.boundary, capacity)

        if points is not None:
            self.insert_range(self.store.handles())

    @classmethod
    def from_points(cls, points, capacity=DEFAULT_CAPACITY):
        """Construye el árbol con el límite mínimo que contiene todos los puntos.

        Lanza EmptyRangeError si no hay puntos.
        """
        store = PointStore.wrap(points)
        return cls(store.bounding_box(), store, capacity)

    @property
    def boundary(self):
        return self.root.boundary

    def insert(self, handle):
        if handle in self._accepted:
            return True
        accepted = self.root.insert(handle)
        if accepted:
            self._accepted.add(handle)
        else:
            logger.debug("punto %d fuera de %r", handle, self.root.boundary)
        return accepted

    def insert_range(self, handles):
        """Inserta en orden; devuelve cuántos fueron aceptados."""
        return sum(1 for handle in handles if self.insert(handle))

    def add(self, point):
        """Agrega el punto al store y lo inserta."""
        return self.insert(self.store.append(point))

    def nodes(self):
        return walk(self.root)

    def leaves(self):
        return [node for _, node in self.nodes() if not node.divided]

    def height(self):
        return max(depth for depth, _ in self.nodes())

    def number_of_points(self):
        return sum(len(leaf.points) for leaf in self.leaves())

    def __len__(self):
        return self.number_of_points()

    def __str__(self):
        return format_tree(self.root)
