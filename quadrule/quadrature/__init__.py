
from .errors import (
    QuadratureError,
    UnsupportedRuleError,
    UnsupportedShapeError,
    UnsupportedOrderError,
    InvalidOrderError,
)
from .gauss_nodes import legendre_nodes, lobatto_nodes
from .quadrature import QuadratureRule, weights, points
from .tensor_product import TensorProductQuadrature, build_cube_rule
from .simplex import (
    SimplexQuadrature, TriangleQuadrature, TetrahedronQuadrature,
    build_simplex_rule, supported_orders, table_row_count
)
from .factory import make_rule, reference_volume
