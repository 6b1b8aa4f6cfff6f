
from enum import Enum
from typing import Tuple, Union

from .backend import TensorLike


### Types

class RuleFamily(str, Enum):
    """Families of one-dimensional Gauss rules."""
    LEGENDRE = 'legendre'
    LOBATTO = 'lobatto'


class RefShape(str, Enum):
    """Reference shapes a quadrature rule can live on.

    `HYPERCUBE` is `[-1, 1]^dim`. `SIMPLEX` is the unit simplex of the given
    dimension and resolves to `TRIANGLE` (dim 2) or `TETRAHEDRON` (dim 3).
    """
    HYPERCUBE = 'hypercube'
    SIMPLEX = 'simplex'
    TRIANGLE = 'triangle'
    TETRAHEDRON = 'tetrahedron'

    @property
    def is_simplex(self) -> bool:
        return self is not RefShape.HYPERCUBE


FamilyLike = Union[RuleFamily, str]
ShapeLike = Union[RefShape, str]
NodesAndWeights = Tuple[TensorLike, TensorLike]


### Constants

SIMPLEX_OF_DIM = {2: RefShape.TRIANGLE, 3: RefShape.TETRAHEDRON}
SUPPORTED_DIMS = (1, 2, 3)
