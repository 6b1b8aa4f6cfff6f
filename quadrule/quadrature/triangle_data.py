"""
Gauss quadrature rules on the reference triangle (0, 0), (1, 0), (0, 1).

Each row is ``(x, y, w)``. The weights are scaled to the triangle area, so
every rule sums to 1/2. The key is the polynomial degree integrated exactly.

Orders 1-3 are the classical Strang-Fix rules, orders 4-6 are the symmetric
rules of D. A. Dunavant, "High degree efficient symmetrical Gaussian
quadrature rules for the triangle", IJNME 21 (1985).
"""

TRIANGLE_DATA = {
    1: (
        (0.3333333333333333, 0.3333333333333333, 0.5),
    ),
    2: (
        (0.16666666666666666, 0.16666666666666666, 0.16666666666666666),
        (0.16666666666666666, 0.6666666666666667, 0.16666666666666666),
        (0.6666666666666667, 0.16666666666666666, 0.16666666666666666),
    ),
    3: (
        (0.3333333333333333, 0.3333333333333333, -0.28125),
        (0.2, 0.2, 0.2604166666666667),
        (0.2, 0.6, 0.2604166666666667),
        (0.6, 0.2, 0.2604166666666667),
    ),
    4: (
        (0.44594849091596489, 0.44594849091596489, 0.11169079483900573),
        (0.44594849091596489, 0.10810301816807023, 0.11169079483900573),
        (0.10810301816807023, 0.44594849091596489, 0.11169079483900573),
        (0.091576213509770743, 0.091576213509770743, 0.054975871827660933),
        (0.091576213509770743, 0.81684757298045851, 0.054975871827660933),
        (0.81684757298045851, 0.091576213509770743, 0.054975871827660933),
    ),
    5: (
        (0.3333333333333333, 0.3333333333333333, 0.1125),
        (0.47014206410511509, 0.47014206410511509, 0.066197076394253090),
        (0.47014206410511509, 0.059715871789769820, 0.066197076394253090),
        (0.059715871789769820, 0.47014206410511509, 0.066197076394253090),
        (0.10128650732345634, 0.10128650732345634, 0.062969590272413576),
        (0.10128650732345634, 0.79742698535308732, 0.062969590272413576),
        (0.79742698535308732, 0.10128650732345634, 0.062969590272413576),
    ),
    6: (
        (0.24928674517091042, 0.24928674517091042, 0.058393137863189683),
        (0.24928674517091042, 0.50142650965817916, 0.058393137863189683),
        (0.50142650965817916, 0.24928674517091042, 0.058393137863189683),
        (0.063089014491502228, 0.063089014491502228, 0.025422453185103408),
        (0.063089014491502228, 0.87382197101699554, 0.025422453185103408),
        (0.87382197101699554, 0.063089014491502228, 0.025422453185103408),
        (0.053145049844816947, 0.31035245103378441, 0.041425537809186788),
        (0.31035245103378441, 0.053145049844816947, 0.041425537809186788),
        (0.053145049844816947, 0.63650249912139865, 0.041425537809186788),
        (0.63650249912139865, 0.053145049844816947, 0.041425537809186788),
        (0.31035245103378441, 0.63650249912139865, 0.041425537809186788),
        (0.63650249912139865, 0.31035245103378441, 0.041425537809186788),
    ),
}
