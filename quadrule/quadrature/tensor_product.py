
from itertools import product
from typing import Iterator, Sequence, Tuple

from ..backend import TensorLike
from ..backend import backend_manager as bm
from ..typing import RuleFamily, RefShape, FamilyLike, SUPPORTED_DIMS
from .gauss_nodes import node_provider
from .quadrature import QuadratureRule, as_family, check_dim


def tensor_indices(order: int, dim: int) -> Iterator[Tuple[int, ...]]:
    """Iterate over all `dim`-tuples of per-axis indices in `range(order)`.

    The first axis is the outermost loop, the last axis varies fastest.
    """
    return product(range(order), repeat=dim)


def flat_index(multi_index: Sequence[int], order: int) -> int:
    """Position of the per-axis index tuple in the `tensor_indices` order."""
    idx = 0
    for i in multi_index:
        idx = idx*order + i
    return idx


class TensorProductQuadrature(QuadratureRule):
    """Gauss rule on the reference hypercube [-1, 1]^dim.

    The points are all combinations of the one-dimensional abscissas, the
    weight of a point is the product of its one-dimensional weights.

    Parameters:
        order (int): number of points per axis.
        dim (int): dimension of the hypercube, 1, 2 or 3.
        family (RuleFamily | str): 'legendre' or 'lobatto'.
    """
    def __init__(self, order: int, dim: int=1, family: FamilyLike=RuleFamily.LEGENDRE,
                 *, dtype=None) -> None:
        self._family = as_family(family)
        self._dim = check_dim(dim, RefShape.HYPERCUBE, SUPPORTED_DIMS,
                              family=self._family, order=order)
        self._shape = RefShape.HYPERCUBE
        super().__init__(order, dtype=dtype)

    def make(self, order: int) -> Tuple[TensorLike, TensorLike]:
        p, w = node_provider(self._family)(order)
        idx = bm.asarray(list(tensor_indices(order, self._dim)), dtype=bm.int64)
        quadpts = p[idx]
        weights = bm.prod(w[idx], axis=-1)
        return quadpts, weights


def build_cube_rule(family: FamilyLike, dim: int, order: int, *, dtype=None) -> TensorProductQuadrature:
    """Build the tensor-product rule with `order` points per axis on [-1, 1]^dim."""
    return TensorProductQuadrature(order, dim, family, dtype=dtype)
