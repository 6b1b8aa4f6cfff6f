
from typing import Callable, Dict

import numpy as np
from scipy.special import roots_legendre, roots_jacobi, eval_legendre

from ..typing import RuleFamily, NodesAndWeights


def legendre_nodes(n: int) -> NodesAndWeights:
    """Gauss-Legendre abscissas and weights on [-1, 1].

    Parameters:
        n (int): number of points, n >= 1. The rule is exact for
            polynomials of degree 2n - 1.

    Returns:
        (ndarray, ndarray): ascending abscissas and their weights.
    """
    x, w = roots_legendre(n)
    return np.asarray(x, dtype=np.float64), np.asarray(w, dtype=np.float64)


def lobatto_nodes(n: int) -> NodesAndWeights:
    """Gauss-Lobatto abscissas and weights on [-1, 1].

    The endpoints are included, the interior nodes are the roots of the
    derivative of the Legendre polynomial P_{n-1}, i.e. the roots of the
    Jacobi polynomial P^{(1, 1)}_{n-2}.

    Parameters:
        n (int): number of points, n >= 2. The rule is exact for
            polynomials of degree 2n - 3.

    Returns:
        (ndarray, ndarray): ascending abscissas and their weights.
    """
    if n > 2:
        interior = np.sort(roots_jacobi(n-2, 1, 1)[0])
    else:
        interior = np.zeros(0, dtype=np.float64)
    x = np.concatenate(([-1.0], interior, [1.0]))
    w = 2.0/(n*(n-1)*eval_legendre(n-1, x)**2)
    return x, w


NODE_PROVIDERS: Dict[RuleFamily, Callable[[int], NodesAndWeights]] = {
    RuleFamily.LEGENDRE: legendre_nodes,
    RuleFamily.LOBATTO: lobatto_nodes,
}

MINIMUM_ORDER: Dict[RuleFamily, int] = {
    RuleFamily.LEGENDRE: 1,
    RuleFamily.LOBATTO: 2,
}


def node_provider(family: RuleFamily) -> Callable[[int], NodesAndWeights]:
    return NODE_PROVIDERS[family]
