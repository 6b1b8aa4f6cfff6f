
import numpy as np

rule_data = [
    {
        "dim": 2,
        "order": 1,
        "points": np.array([[1/3, 1/3]], dtype=np.float64),
        "weights": np.array([0.5], dtype=np.float64),
    },
    {
        "dim": 2,
        "order": 2,
        "points": np.array([[1/6, 1/6], [1/6, 2/3], [2/3, 1/6]], dtype=np.float64),
        "weights": np.array([1/6, 1/6, 1/6], dtype=np.float64),
    },
    {
        "dim": 3,
        "order": 1,
        "points": np.array([[0.25, 0.25, 0.25]], dtype=np.float64),
        "weights": np.array([1/6], dtype=np.float64),
    },
    {
        "dim": 3,
        "order": 3,
        "points": np.array([
            [0.25, 0.25, 0.25],
            [1/6, 1/6, 1/6],
            [0.5, 1/6, 1/6],
            [1/6, 0.5, 1/6],
            [1/6, 1/6, 0.5]], dtype=np.float64),
        "weights": np.array([-2/15, 3/40, 3/40, 3/40, 3/40], dtype=np.float64),
    },
]

count_data = [
    (2, 1, 1), (2, 2, 3), (2, 3, 4), (2, 4, 6), (2, 5, 7), (2, 6, 12),
    (3, 1, 1), (3, 2, 4), (3, 3, 5), (3, 4, 11),
]

volume_data = [(2, 1/2), (3, 1/6)]
