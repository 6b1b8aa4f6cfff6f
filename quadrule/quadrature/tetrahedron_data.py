"""
Gauss quadrature rules on the reference tetrahedron (0, 0, 0), (1, 0, 0),
(0, 1, 0), (0, 0, 1).

Each row is ``(x, y, z, w)``. The weights are scaled to the tetrahedron
volume, so every rule sums to 1/6. The key is the polynomial degree
integrated exactly. Order 4 is the 11 point rule of P. Keast, "Moderate
degree tetrahedral quadrature formulas", CMAME 55 (1986).
"""

TETRAHEDRON_DATA = {
    1: (
        (0.25, 0.25, 0.25, 0.16666666666666666),
    ),
    2: (
        (0.1381966011250105, 0.1381966011250105, 0.1381966011250105, 0.041666666666666664),
        (0.5854101966249685, 0.1381966011250105, 0.1381966011250105, 0.041666666666666664),
        (0.1381966011250105, 0.5854101966249685, 0.1381966011250105, 0.041666666666666664),
        (0.1381966011250105, 0.1381966011250105, 0.5854101966249685, 0.041666666666666664),
    ),
    3: (
        (0.25, 0.25, 0.25, -0.13333333333333333),
        (0.16666666666666666, 0.16666666666666666, 0.16666666666666666, 0.075),
        (0.5, 0.16666666666666666, 0.16666666666666666, 0.075),
        (0.16666666666666666, 0.5, 0.16666666666666666, 0.075),
        (0.16666666666666666, 0.16666666666666666, 0.5, 0.075),
    ),
    4: (
        (0.25, 0.25, 0.25, -0.013155555555555556),
        (0.07142857142857142, 0.07142857142857142, 0.07142857142857142, 0.0076222222222222225),
        (0.7857142857142857, 0.07142857142857142, 0.07142857142857142, 0.0076222222222222225),
        (0.07142857142857142, 0.7857142857142857, 0.07142857142857142, 0.0076222222222222225),
        (0.07142857142857142, 0.07142857142857142, 0.7857142857142857, 0.0076222222222222225),
        (0.3994035761667992, 0.3994035761667992, 0.1005964238332008, 0.024888888888888887),
        (0.3994035761667992, 0.1005964238332008, 0.3994035761667992, 0.024888888888888887),
        (0.3994035761667992, 0.1005964238332008, 0.1005964238332008, 0.024888888888888887),
        (0.1005964238332008, 0.3994035761667992, 0.3994035761667992, 0.024888888888888887),
        (0.1005964238332008, 0.3994035761667992, 0.1005964238332008, 0.024888888888888887),
        (0.1005964238332008, 0.1005964238332008, 0.3994035761667992, 0.024888888888888887),
    ),
}
