import unittest
from unittest import mock
import numpy as np

from eigvalsym import EigValSym, PreconditionViolation, EigValSymError, Triangle, AllocationFailure
from eigvalsym import symmetriceigenvaluesolver
from utils import backends, rand_symmetric

class TestPreconditions(unittest.TestCase):

    def setUp(self):
        self.solvers = [EigValSym(backend) for backend in backends]

    def test_matrix_too_small(self):
        for es in self.solvers:
            mat = rand_symmetric(3)
            with self.assertRaises(PreconditionViolation) as ctx:
                es.eigvalsym(mat, 4)
            self.assertEqual(ctx.exception.what, "mat")
            self.assertEqual(ctx.exception.expected, (4, 4))
            self.assertEqual(ctx.exception.actual, (3, 3))
            self.assertIn("(4, 4)", str(ctx.exception))

            self.assertRaises(PreconditionViolation, es.eigvalsym, np.zeros((5, 3)), 4)
            self.assertRaises(PreconditionViolation, es.eigvalsym, np.zeros((3, 5)), 4)

    def test_out_too_small(self):
        for es in self.solvers:
            mat = rand_symmetric(4)
            out = np.full(3, 7.0)
            with self.assertRaises(PreconditionViolation) as ctx:
                es.eigvalsym(mat, 4, out=out)
            self.assertEqual(ctx.exception.what, "out")
            self.assertEqual(ctx.exception.expected, (4,))
            self.assertEqual(ctx.exception.actual, (3,))
            self.assertTrue(np.all(out == 7.0))

            out = np.full((4, 1), 7.0)
            self.assertRaises(PreconditionViolation, es.eigvalsym, mat, 4, out=out)
            self.assertTrue(np.all(out == 7.0))

    def test_invalid_order(self):
        for es in self.solvers:
            mat = rand_symmetric(3)
            self.assertRaises(PreconditionViolation, es.eigvalsym, mat, 0)
            self.assertRaises(PreconditionViolation, es.eigvalsym, mat, -2)
            self.assertRaises(TypeError, es.eigvalsym, mat, 2.5)
            self.assertRaises(PreconditionViolation, es.eigvalsym, np.zeros(3))
            self.assertRaises(PreconditionViolation, es.eigvalsym, np.zeros((0, 0)))

    def test_error_hierarchy(self):
        for es in self.solvers:
            self.assertRaises(ValueError, es.eigvalsym, rand_symmetric(2), 3)
            self.assertRaises(EigValSymError, es.eigvalsym, rand_symmetric(2), 3)

    def test_unsupported_dtype(self):
        for es in self.solvers:
            mat = rand_symmetric(3) + 1j * np.eye(3)
            self.assertRaises(TypeError, es.eigvalsym, mat)
            self.assertRaises(TypeError, es.eigvalsym, np.array([["a", "b"], ["b", "a"]]))

    def test_allocation_failure(self):
        for es in self.solvers:
            mat = rand_symmetric(4)
            out = np.full(4, 7.0)
            with mock.patch.object(symmetriceigenvaluesolver.np, "array", side_effect=MemoryError):
                with self.assertRaises(AllocationFailure) as ctx:
                    es.eigvalsym(mat, out=out)
            self.assertIsInstance(ctx.exception, MemoryError)
            self.assertEqual(ctx.exception.shape, (4, 4))
            self.assertIn("working copy", str(ctx.exception))
            self.assertTrue(np.all(out == 7.0))

    def test_out_dtype(self):
        for es in self.solvers:
            mat = np.array([[2.5, 0.0], [0.0, 1.5]])
            out = np.zeros(2, dtype=np.int64)
            self.assertRaises(TypeError, es.eigvalsym, mat, out=out)
            self.assertTrue(np.all(out == 0))
            out = np.zeros(2, dtype=np.float32)
            es.eigvalsym(mat, out=out)
            self.assertTrue(np.allclose(out, [2.5, 1.5]))

    def test_unsupported_input(self):
        for es in self.solvers:
            with self.assertRaises(TypeError) as ctx:
                es.eigvalsym([[1.0, 0.0], [0.0, 1.0]])
            self.assertIn("list", str(ctx.exception))

    def test_triangle(self):
        self.assertEqual(Triangle.parse("U"), Triangle.UPPER)
        self.assertEqual(Triangle.parse("l"), Triangle.LOWER)
        self.assertEqual(Triangle.parse("Lower"), Triangle.LOWER)
        self.assertEqual(Triangle.parse(Triangle.UPPER), Triangle.UPPER)
        self.assertEqual(Triangle.UPPER.lower, 0)
        self.assertEqual(Triangle.LOWER.lower, 1)
        self.assertRaises(ValueError, Triangle.parse, "X")
        for es in self.solvers:
            self.assertRaises(ValueError, es.eigvalsym, rand_symmetric(2), uplo="diag")

if __name__ == "__main__":
    unittest.main()
