
from functools import lru_cache
from typing import Tuple

from ..backend import TensorLike
from ..backend import backend_manager as bm
from ..typing import RuleFamily, RefShape, FamilyLike, SIMPLEX_OF_DIM
from .errors import UnsupportedRuleError, UnsupportedOrderError
from .quadrature import QuadratureRule, as_family, check_dim
from .triangle_data import TRIANGLE_DATA
from .tetrahedron_data import TETRAHEDRON_DATA


SIMPLEX_DATA = {
    2: TRIANGLE_DATA,
    3: TETRAHEDRON_DATA,
}


def _simplex_table(dim: int):
    return SIMPLEX_DATA[check_dim(dim, RefShape.SIMPLEX, SIMPLEX_DATA)]


def supported_orders(dim: int) -> Tuple[int, ...]:
    """The orders tabulated for the reference simplex of dimension `dim`."""
    return tuple(sorted(_simplex_table(dim)))


@lru_cache(maxsize=None)
def _table_rows(dim: int, order: int) -> TensorLike:
    table = _simplex_table(dim)
    if order not in table:
        raise UnsupportedOrderError(
            f"no {SIMPLEX_OF_DIM[dim].value} quadrature rule of order {order} "
            f"(dim={dim}), supported orders are {supported_orders(dim)}",
            family=RuleFamily.LEGENDRE, dim=dim, shape=SIMPLEX_OF_DIM[dim], order=order)
    return bm.readonly(bm.array(table[order], dtype=bm.float64))


def table_row_count(dim: int, order: int) -> int:
    """Number of quadrature points of the tabulated simplex rule."""
    return len(_table_rows(dim, order))


class SimplexQuadrature(QuadratureRule):
    """Tabulated Gauss rule on the unit reference simplex.

    The points are Cartesian coordinates of the simplex with vertices at the
    origin and the unit vectors, the weights sum to its measure.

    Parameters:
        order (int): polynomial degree integrated exactly, see
            `supported_orders(dim)`.
        dim (int): 2 for the triangle, 3 for the tetrahedron.
        family (RuleFamily | str): only 'legendre' is available.
    """
    def __init__(self, order: int, dim: int, family: FamilyLike=RuleFamily.LEGENDRE,
                 *, dtype=None) -> None:
        family = as_family(family)
        _simplex_table(dim)
        if family is not RuleFamily.LEGENDRE:
            raise UnsupportedRuleError(
                f"the {family.value} rule is only available on the hypercube, "
                f"not on the {SIMPLEX_OF_DIM[dim].value}",
                family=family, dim=dim, shape=SIMPLEX_OF_DIM[dim], order=order)
        self._dim = dim
        self._shape = SIMPLEX_OF_DIM[dim]
        super().__init__(order, dtype=dtype)

    def make(self, order: int) -> Tuple[TensorLike, TensorLike]:
        data = _table_rows(self._dim, order)
        return data[:, :self._dim], data[:, self._dim]

    def barycentric_points(self) -> TensorLike:
        """Barycentric coordinates (1 - x_1 - ... - x_d, x_1, ..., x_d) of the
        points, an array of shape (NQ, GD+1)."""
        quadpts = self.points()
        l0 = 1 - bm.sum(quadpts, axis=-1, keepdims=True)
        return bm.concatenate([l0, quadpts], axis=-1)


class TriangleQuadrature(SimplexQuadrature):
    def __init__(self, order: int, *, dtype=None) -> None:
        super().__init__(order, 2, dtype=dtype)


class TetrahedronQuadrature(SimplexQuadrature):
    def __init__(self, order: int, *, dtype=None) -> None:
        super().__init__(order, 3, dtype=dtype)


def build_simplex_rule(dim: int, order: int, family: FamilyLike=RuleFamily.LEGENDRE,
                       *, dtype=None) -> SimplexQuadrature:
    """Look up the tabulated rule of `order` on the reference simplex of
    dimension `dim`."""
    return SimplexQuadrature(order, dim, family, dtype=dtype)
