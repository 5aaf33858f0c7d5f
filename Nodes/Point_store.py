import numpy as np

from Nodes.Errors import EmptyRangeError


class PointStore:
    """Colección de puntos del usuario, solo se puede agregar.

    El árbol no guarda puntos: guarda handles (índices enteros) a esta
    colección, que debe vivir mientras viva el árbol. Los datos se copian
    una vez al crear el store; después los handles son estables porque
    nunca se borra ni se reordena nada, y el arreglo que se expone es de
    solo lectura, así que modificar un punto ya indexado falla en lugar de
    corromper el árbol.
    """

    def __init__(self, points=None, dtype=None):
        if points is None:
            data = np.empty((0, 2), dtype=dtype or float)
        else:
            data = np.array(points, dtype=dtype)
            if data.size == 0:
                data = data.reshape(0, 2)
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError(f"Se esperaban puntos de 2 componentes, forma recibida: {data.shape}")
        # buffer con espacio de sobra; solo las primeras _n filas son puntos
        self._buf = data
        self._n = len(data)
        self._buf.flags.writeable = False

    @classmethod
    def wrap(cls, points):
        if isinstance(points, PointStore):
            return points
        return cls(points)

    @property
    def array(self):
        return self._buf[:self._n]

    @property
    def dtype(self):
        return self._buf.dtype

    def __len__(self):
        return self._n

    def __getitem__(self, handle):
        return self.point(handle)

    def point(self, handle):
        if not 0 <= handle < self._n:
            raise IndexError(f"Handle inválido: {handle} (hay {self._n} puntos)")
        return self._buf[handle]

    def handles(self):
        return range(self._n)

    def append(self, point):
        row = np.asarray(point, dtype=self._buf.dtype)
        if row.shape != (2,):
            raise ValueError(f"Se esperaba un punto de 2 componentes, forma recibida: {row.shape}")
        if self._n == len(self._buf):
            # crecer al doble, las filas existentes conservan su índice
            grown = np.empty((max(8, 2 * len(self._buf)), 2), dtype=self._buf.dtype)
            grown[:self._n] = self._buf[:self._n]
            self._buf = grown
        self._buf.flags.writeable = True
        self._buf[self._n] = row
        self._buf.flags.writeable = False
        self._n += 1
        return self._n - 1

    def bounding_box(self):
        if self._n == 0:
            raise EmptyRangeError("No se permite un rango vacío para calcular el límite")
        data = self.array
        mins = data.min(axis=0)
        maxs = data.max(axis=0)
        return (mins[0], mins[1]), (maxs[0], maxs[1])

    def __repr__(self):
        return f"PointStore({len(self)} puntos, dtype={self.dtype})"
