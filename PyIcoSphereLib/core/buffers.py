import numpy as np


class VertexBuffer:
    """Append-only (N, 3) float64 store that grows by doubling."""

    def __init__(self, initial=None, capacity: int = 0):
        initial = np.zeros((0, 3), float) if initial is None else np.asarray(initial, float).reshape(-1, 3)
        n = initial.shape[0]
        self._data = np.empty((max(capacity, n, 1), 3), float)
        self._data[:n] = initial
        self._count = n

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, i: int) -> np.ndarray:
        if i < 0 or i >= self._count:
            raise IndexError(i)
        return self._data[i]

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    def append(self, p) -> int:
        if self._count == self._data.shape[0]:
            grown = np.empty((2 * self._data.shape[0], 3), float)
            grown[:self._count] = self._data[:self._count]
            self._data = grown
        idx = self._count
        self._data[idx] = p
        self._count += 1
        return idx

    def to_array(self) -> np.ndarray:
        return self._data[:self._count].copy()
