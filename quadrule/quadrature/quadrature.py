
from typing import Callable, Iterable, Tuple

from .. import logger
from ..backend import TensorLike
from ..backend import backend_manager as bm
from ..typing import RuleFamily, RefShape, FamilyLike, ShapeLike
from .errors import UnsupportedRuleError, UnsupportedShapeError, InvalidOrderError
from .gauss_nodes import MINIMUM_ORDER


def as_family(family: FamilyLike) -> RuleFamily:
    """Convert a family name to `RuleFamily`."""
    if isinstance(family, RuleFamily):
        return family
    try:
        return RuleFamily(str(family).lower())
    except ValueError:
        raise UnsupportedRuleError(
            f"unsupported quadrature rule family {family!r}, "
            f"expected one of {[f.value for f in RuleFamily]}",
            family=family) from None


def as_shape(shape: ShapeLike) -> RefShape:
    """Convert a reference shape name to `RefShape`."""
    if isinstance(shape, RefShape):
        return shape
    try:
        return RefShape(str(shape).lower())
    except ValueError:
        raise UnsupportedShapeError(
            f"unsupported reference shape {shape!r}, "
            f"expected one of {[s.value for s in RefShape]}",
            shape=shape) from None


def check_dim(dim, shape: RefShape, supported: Iterable[int], **context) -> int:
    """Return `dim` if the reference shape exists in that dimension, raise
    `UnsupportedShapeError` otherwise."""
    supported = tuple(supported)
    if isinstance(dim, bool) or not isinstance(dim, int) or dim not in supported:
        raise UnsupportedShapeError(
            f"no reference {shape.value} of dimension {dim!r}, "
            f"expected one of {supported}",
            dim=dim, shape=shape, **context)
    return dim


def check_order(order, family: RuleFamily=RuleFamily.LEGENDRE, **context) -> int:
    """Return `order` if it is a valid number of points (or degree) for the
    family, raise `InvalidOrderError` otherwise."""
    if isinstance(order, bool) or not isinstance(order, int):
        raise InvalidOrderError(
            f"the order of a quadrature rule must be an integer, got {order!r}",
            family=family, order=order, **context)
    low = MINIMUM_ORDER[family]
    if order < low:
        raise InvalidOrderError(
            f"the order of a {family.value} rule must be >= {low}, got {order}",
            family=family, order=order, **context)
    return order


class QuadratureRule():
    r"""Base class of quadrature rules on reference shapes.

    A quadrature rule approximates an integral over the reference domain by
    a weighted sum of function values:

    .. math::
        \int_\Omega f(x) \mathrm{d}x \approx \sum_{q=0}^{NQ-1} f(x_q) w_q

    Subclasses implement `make(order)` returning the points, an array of
    shape (NQ, GD), and the weights, an array of shape (NQ, ). The rule is
    frozen after construction: both arrays are read-only and attributes can
    not be reassigned.
    """
    _family: RuleFamily = RuleFamily.LEGENDRE
    _shape: RefShape = RefShape.HYPERCUBE
    _dim: int = 1

    def __init__(self, order: int, *, dtype=None) -> None:
        self._order = check_order(order, self._family, dim=self._dim, shape=self._shape)
        self.dtype = dtype if dtype is not None else bm.float64
        quadpts, weights = self.make(order)
        self._quadpts = bm.readonly(bm.asarray(quadpts, dtype=self.dtype))
        self._weights = bm.readonly(bm.asarray(weights, dtype=self.dtype))
        logger.debug(f"{self.__class__.__name__}: family={self._family.value}, "
                     f"shape={self._shape.value}, dim={self._dim}, order={order}, "
                     f"NQ={self.number_of_quadrature_points()}")
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable, "
                                 f"can not set attribute '{name}'")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable, "
                             f"can not delete attribute '{name}'")

    def __len__(self) -> int:
        return self.number_of_quadrature_points()

    def __getitem__(self, i: int) -> Tuple[TensorLike, TensorLike]:
        return self.get_quadrature_point_and_weight(i)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(dim={self._dim}, "
                f"shape='{self._shape.value}', family='{self._family.value}', "
                f"order={self._order}, NQ={self.number_of_quadrature_points()})")

    def make(self, order: int) -> Tuple[TensorLike, TensorLike]:
        raise NotImplementedError

    @property
    def order(self) -> int:
        return self._order

    @property
    def family(self) -> RuleFamily:
        return self._family

    @property
    def shape(self) -> RefShape:
        return self._shape

    @property
    def dim(self) -> int:
        return self._dim

    def weights(self) -> TensorLike:
        """The weights of the rule, a read-only array of shape (NQ, )."""
        return self._weights

    def points(self) -> TensorLike:
        """The points of the rule, a read-only array of shape (NQ, GD)."""
        return self._quadpts

    def number_of_quadrature_points(self) -> int:
        return self._weights.shape[0]

    def get_quadrature_points_and_weights(self) -> Tuple[TensorLike, TensorLike]:
        """Get all quadrature points and weights in the formula.

        Returns:
            (Tensor, Tensor): Quadrature points and weights.
        """
        return self._quadpts, self._weights

    def get_quadrature_point_and_weight(self, i: int) -> Tuple[TensorLike, TensorLike]:
        """Get the i-th quadrature point and weight.

        Parameters:
            i (int): index of the quadrature point.

        Returns:
            (Tensor, Tensor): A quadrature point and weight.
        """
        return self._quadpts[i, :], self._weights[i]

    def integrate(self, f: Callable[[TensorLike], TensorLike]) -> TensorLike:
        """Apply the rule to `f` on the reference shape.

        Parameters:
            f (Callable): function of the points array (NQ, GD) returning
                values of shape (NQ, ...).

        Returns:
            Tensor: the weighted sum of the values, of shape (...).
        """
        val = f(self._quadpts)
        return bm.einsum('q...,q->...', val, self._weights)


def weights(rule: QuadratureRule) -> TensorLike:
    """The weights of `rule`."""
    return rule.weights()


def points(rule: QuadratureRule) -> TensorLike:
    """The points of `rule`."""
    return rule.points()
