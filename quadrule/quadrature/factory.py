
from ..typing import (
    RuleFamily, RefShape, FamilyLike, ShapeLike, SIMPLEX_OF_DIM, SUPPORTED_DIMS
)
from .errors import UnsupportedRuleError, UnsupportedShapeError
from .quadrature import QuadratureRule, as_family, as_shape, check_dim, check_order
from .simplex import SimplexQuadrature
from .tensor_product import TensorProductQuadrature


def _resolve_shape(shape: RefShape, dim: int) -> RefShape:
    if shape is RefShape.HYPERCUBE:
        check_dim(dim, shape, SUPPORTED_DIMS)
        return shape
    check_dim(dim, shape, SIMPLEX_OF_DIM)
    if shape is RefShape.SIMPLEX:
        return SIMPLEX_OF_DIM[dim]
    if SIMPLEX_OF_DIM[dim] is not shape:
        raise UnsupportedShapeError(
            f"the reference {shape.value} does not have dimension {dim}",
            dim=dim, shape=shape)
    return shape


def make_rule(dim: int, shape: ShapeLike, order: int,
              family: FamilyLike=RuleFamily.LEGENDRE, *, dtype=None) -> QuadratureRule:
    """Construct the quadrature rule of `order` on a reference shape.

    Parameters:
        dim (int): dimension of the reference shape, 1, 2 or 3.
        shape (RefShape | str): 'hypercube', 'simplex', 'triangle' or
            'tetrahedron'. 'simplex' means the triangle for dim 2 and the
            tetrahedron for dim 3.
        order (int): number of points per axis on the hypercube, polynomial
            degree on the simplices.
        family (RuleFamily | str): 'legendre' (default) or 'lobatto'.
            'lobatto' is only available on the hypercube.

    Returns:
        QuadratureRule: `TensorProductQuadrature` on the hypercube,
            `SimplexQuadrature` on the simplices.

    Raises:
        UnsupportedRuleError: unknown family, or lobatto on a simplex.
        UnsupportedShapeError: unknown shape or no such shape in `dim`.
        InvalidOrderError: order < 1, or order < 2 for lobatto.
        UnsupportedOrderError: no simplex rule tabulated for `order`.
    """
    family = as_family(family)
    shape = _resolve_shape(as_shape(shape), dim)

    if shape is RefShape.HYPERCUBE:
        check_order(order, family, dim=dim, shape=shape)
        return TensorProductQuadrature(order, dim, family, dtype=dtype)

    if family is not RuleFamily.LEGENDRE:
        raise UnsupportedRuleError(
            f"the {family.value} rule is only available on the hypercube, "
            f"not on the {shape.value}", family=family, dim=dim, shape=shape, order=order)
    check_order(order, family, dim=dim, shape=shape)
    return SimplexQuadrature(order, dim, family, dtype=dtype)


def reference_volume(shape: ShapeLike, dim: int) -> float:
    """Measure of the reference shape, i.e. the sum of the weights of any
    rule on it."""
    shape = _resolve_shape(as_shape(shape), dim)
    if shape is RefShape.HYPERCUBE:
        return float(2**dim)
    return 1/2 if shape is RefShape.TRIANGLE else 1/6
