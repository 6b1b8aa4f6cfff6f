
import numpy as np
from numpy.typing import NDArray

from .base import (
    BackendProxy,
    ATTRIBUTE_MAPPING, FUNCTION_MAPPING
)


class NumPyBackend(BackendProxy, backend_name='numpy'):
    DATA_CLASS = np.ndarray

    @staticmethod
    def to_numpy(tensor_like: NDArray, /) -> NDArray:
        return tensor_like

    @staticmethod
    def readonly(tensor: NDArray, /) -> NDArray:
        # An array backed by `bytes` can not have its WRITEABLE flag set again.
        buffer = np.ascontiguousarray(tensor).tobytes()
        return np.frombuffer(buffer, dtype=tensor.dtype).reshape(tensor.shape)

    @staticmethod
    def concat(arrays, /, *, axis=0):
        return np.concatenate(arrays, axis=axis)


NumPyBackend.attach_attributes(ATTRIBUTE_MAPPING, np)
NumPyBackend.attach_methods(FUNCTION_MAPPING, np)
