
from quadrule.quadrature import (
    UnsupportedRuleError, UnsupportedShapeError, UnsupportedOrderError,
    InvalidOrderError
)

# (dim, shape, order, family, expected class name)
dispatch_data = [
    (1, 'hypercube', 3, 'legendre', 'TensorProductQuadrature'),
    (2, 'hypercube', 3, 'lobatto', 'TensorProductQuadrature'),
    (3, 'HYPERCUBE', 2, 'Legendre', 'TensorProductQuadrature'),
    (2, 'simplex', 2, 'legendre', 'SimplexQuadrature'),
    (3, 'simplex', 2, 'legendre', 'SimplexQuadrature'),
    (2, 'triangle', 5, 'legendre', 'SimplexQuadrature'),
    (3, 'tetrahedron', 4, 'legendre', 'SimplexQuadrature'),
]

# (dim, shape, order, family, expected error)
error_data = [
    (2, 'triangle', 2, 'lobatto', UnsupportedRuleError),
    (3, 'tetrahedron', 2, 'lobatto', UnsupportedRuleError),
    (2, 'simplex', 0, 'lobatto', UnsupportedRuleError),
    (2, 'hypercube', 2, 'chebyshev', UnsupportedRuleError),
    (2, 'triangle', 99, 'legendre', UnsupportedOrderError),
    (3, 'tetrahedron', 7, 'legendre', UnsupportedOrderError),
    (1, 'hypercube', 0, 'legendre', InvalidOrderError),
    (1, 'hypercube', -3, 'legendre', InvalidOrderError),
    (1, 'hypercube', 1, 'lobatto', InvalidOrderError),
    (2, 'hypercube', 2.0, 'legendre', InvalidOrderError),
    (2, 'hypercube', True, 'legendre', InvalidOrderError),
    (2, 'triangle', 0, 'legendre', InvalidOrderError),
    (2, 'prism', 1, 'legendre', UnsupportedShapeError),
    (3, 'triangle', 1, 'legendre', UnsupportedShapeError),
    (2, 'tetrahedron', 1, 'legendre', UnsupportedShapeError),
    (1, 'simplex', 1, 'legendre', UnsupportedShapeError),
    (4, 'hypercube', 1, 'legendre', UnsupportedShapeError),
    (0, 'hypercube', 1, 'legendre', UnsupportedShapeError),
    (2.0, 'hypercube', 2, 'legendre', UnsupportedShapeError),
    (True, 'hypercube', 2, 'legendre', UnsupportedShapeError),
    (2.0, 'triangle', 1, 'legendre', UnsupportedShapeError),
    ('3', 'simplex', 1, 'legendre', UnsupportedShapeError),
]
