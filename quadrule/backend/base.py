
from abc import ABCMeta
from typing import Union, Optional, Dict, Tuple, Any, Type, TypeVar

from .. import logger

_Self = TypeVar("_Self")
Number = Union[int, float]
Size = Tuple[int, ...]

class TensorLike(metaclass=ABCMeta):
    @property
    def dtype(self) -> Any: ...
    @property
    def ndim(self) -> int: ...
    @property
    def shape(self) -> Tuple[int, ...]: ...
    @property
    def size(self) -> int: ...
    @property
    def T(self: _Self) -> _Self: ...

    def __len__(self) -> int: ...
    def __getitem__(self: _Self, index: Union[int, _Self, slice]) -> _Self: ...
    def __add__(self: _Self, other: Union[Number, _Self]) -> _Self: ...
    def __sub__(self: _Self, other: Union[Number, _Self]) -> _Self: ...
    def __mul__(self: _Self, other: Union[Number, _Self]) -> _Self: ...
    def __truediv__(self: _Self, other: Union[Number, _Self]) -> _Self: ...
    def __pow__(self: _Self, other: Union[Number, _Self]) -> _Self: ...
    def __neg__(self: _Self) -> _Self: ...


# NOTE: The mappings below use the names of the quadrature backend as keys,
# and the values are the corresponding names in the array library.
#
#   - A function NOT defined in the BackendProxy subclass is copied from the
#     array library according to the mapping.
#   - {'concat': 'concatenate'} means `backend_manager.concat(...)` calls
#     `concatenate` of the array library.

def _make_default_mapping(*names: str):
    return {k: k for k in names}


ATTRIBUTE_MAPPING = _make_default_mapping(
    'float32', 'float64', 'int64',
)

FUNCTION_MAPPING = _make_default_mapping(
    # Creation
    'array', 'asarray', 'zeros', 'ones',
    # Manipulation
    'concat', 'concatenate',
    # Statistical
    'prod', 'sum',
    # Linear algebra
    'einsum',
    # Utility
    'all',
)


class ModuleProxy():
    @classmethod
    def attach_attributes(cls, mapping: Dict[str, str], source: Any, /):
        for target_key, source_key in mapping.items():
            if not source_key:
                continue
            if hasattr(source, source_key):
                setattr(cls, target_key, getattr(source, source_key))

    @classmethod
    def attach_methods(cls, mapping: Dict[str, str], source: Any, /):
        for target_key, source_key in mapping.items():
            if not source_key:
                continue
            if hasattr(cls, target_key):
                # Methods implemented manually are kept.
                logger.debug(f"`{target_key}` already defined. "
                             f"Skip the copy from {source.__name__}.")
                continue
            if hasattr(source, source_key):
                setattr(cls, target_key, staticmethod(getattr(source, source_key)))
            else:
                logger.info(f"`{source_key}` not found in {source.__name__}. "
                            f"Method `{target_key}` remains unimplemented.")


class BackendProxy(ModuleProxy):
    """Base class for all backend proxies."""
    DATA_CLASS: Optional[Type] = None
    _available_backends: Dict[str, Type["BackendProxy"]] = {}

    def __init_subclass__(cls, backend_name: str, **kwargs):
        super().__init_subclass__(**kwargs)

        if backend_name != "":
            cls._available_backends[backend_name.lower()] = cls
            cls.backend_name = backend_name
            TensorLike.register(cls.DATA_CLASS)
        else:
            raise ValueError("Backend name cannot be empty.")

    @staticmethod
    def readonly(tensor: Any, /) -> Any:
        """Return a copy of `tensor` whose memory can never be made writeable."""
        raise NotImplementedError
