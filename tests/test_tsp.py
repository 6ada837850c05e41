import math
import unittest
from decimal import Decimal

import numpy as np

from kopt import DistanceMatrix, InvalidTourError
from kopt.tsp import validate_tour


class TestDistanceMatrix(unittest.TestCase):
    def test_build_2d(self):
        m = DistanceMatrix.build_2d([(0.0, 0.0), (3.0, 4.0), (0.0, 1.0)])
        self.assertEqual(len(m), 3)
        self.assertEqual(m[0][1], 5.0)
        self.assertEqual(m[0][2], 1.0)
        self.assertAlmostEqual(m[1][2], math.sqrt(18.0))
        for i in range(3):
            self.assertEqual(m[i][i], 0.0)
            for j in range(3):
                self.assertEqual(m[i][j], m[j][i])

    def test_build_3d(self):
        m = DistanceMatrix.build_3d([(0.0, 0.0, 0.0), (1.0, 2.0, 2.0)])
        self.assertEqual(m[0][1], 3.0)
        self.assertEqual(m[1][0], 3.0)

    def test_empty_and_single(self):
        self.assertEqual(len(DistanceMatrix.build_2d([])), 0)
        self.assertEqual(DistanceMatrix.build_2d([(2.5, -1.0)]).rows, ((0.0,),))
        self.assertEqual(DistanceMatrix.build_3d([]).to_numpy().shape, (0, 0))

    def test_wrong_dimension_rejected(self):
        with self.assertRaises(ValueError):
            DistanceMatrix.build_2d([(0.0, 0.0, 1.0)])

    def test_immutable(self):
        m = DistanceMatrix.build_2d([(0.0, 0.0), (1.0, 0.0)])
        with self.assertRaises(AttributeError):
            m.rows = ()
        with self.assertRaises(TypeError):
            m[0][1] = 7.0

    def test_decimal_coordinates(self):
        m = DistanceMatrix.build_2d([(Decimal(0), Decimal(0)), (Decimal(4), Decimal(2))])
        self.assertIsInstance(m[0][1], Decimal)
        self.assertEqual(m[0][1], Decimal(20).sqrt())

    def test_numpy_points(self):
        pts = np.array([[0.0, 0.0], [0.0, 2.0], [2.0, 2.0]])
        m = DistanceMatrix.build_2d(pts)
        self.assertEqual(m[0][1], 2.0)
        np.testing.assert_allclose(m.to_numpy(), m.to_numpy().T)

    def test_from_table(self):
        m = DistanceMatrix.from_table([[0, 2, 9], [2, 0, 6], [9, 6, 0]])
        self.assertEqual(m.tour_length([0, 1, 2]), 17)
        with self.assertRaises(ValueError):
            DistanceMatrix.from_table([[0, 1], [1, 0, 3]])
        with self.assertRaises(ValueError):
            DistanceMatrix.from_table([[0, 1], [5, 0]])
        with self.assertRaises(ValueError):
            DistanceMatrix.from_table([[1, 2], [2, 0]])
        with self.assertRaises(ValueError):
            DistanceMatrix.from_table([[0, -2], [-2, 0]])
        self.assertEqual(len(DistanceMatrix.from_table([])), 0)

    def test_tour_length_is_cyclic(self):
        m = DistanceMatrix.build_2d([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        self.assertEqual(m.tour_length([0, 1, 2, 3]), 4.0)
        self.assertEqual(m.tour_length([]), 0)


class TestValidateTour(unittest.TestCase):
    def test_identity_default(self):
        self.assertEqual(validate_tour(None, 4), [0, 1, 2, 3])
        self.assertEqual(validate_tour(None, 0), [])

    def test_copy_is_private(self):
        start = [2, 0, 1]
        path = validate_tour(start, 3)
        path.reverse()
        self.assertEqual(start, [2, 0, 1])

    def test_numpy_indices_accepted(self):
        self.assertEqual(validate_tour(np.array([1, 0, 2]), 3), [1, 0, 2])

    def test_invalid_tours(self):
        for bad in ([0, 1], [0, 1, 1], [0, 1, 3], [0, -1, 2], [0, 1.0, 2]):
            with self.subTest(tour=bad):
                with self.assertRaises(InvalidTourError):
                    validate_tour(bad, 3)

    def test_invalid_tour_is_value_error(self):
        self.assertTrue(issubclass(InvalidTourError, ValueError))


if __name__ == "__main__":
    unittest.main()
