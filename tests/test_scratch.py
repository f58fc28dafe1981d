import unittest
import warnings
import numpy as np

from eigvalsym import EigValSym, ScratchUndersizedWarning
from eigvalsym.typing import ScratchPolicy, ScratchDiagnostic, SymmetricEigenvalueSolver
from utils import backends, rand_symmetric

class TestScratch(unittest.TestCase):

    def setUp(self):
        self.solvers = [EigValSym(backend) for backend in backends]

    def test_construction(self):
        policy = ScratchPolicy()
        self.assertEqual(policy.nb, 80)
        self.assertEqual(policy.nbl, 10)
        self.assertEqual(policy.lwork(5), 400)
        self.assertEqual(policy.liwork(5), 50)
        self.assertRaises(ValueError, ScratchPolicy, nb=0)
        self.assertRaises(ValueError, ScratchPolicy, nbl=-1)
        with self.assertRaises(ValueError):
            policy.nb = 0
        self.assertRaises(TypeError, ScratchPolicy, nb=1.5)
        self.assertRaises(TypeError, ScratchPolicy, nbl=2.5)
        self.assertEqual(ScratchPolicy(nb=np.int64(4)).lwork(3), 12)

    def test_default_is_sufficient(self):
        for es in self.solvers:
            mat = rand_symmetric(50, seed=1)
            with warnings.catch_warnings():
                warnings.simplefilter("error", ScratchUndersizedWarning)
                res = es.solve(mat)
            self.assertEqual(res.diagnostics, [])

    def test_undersized(self):
        for es in self.solvers:
            mat = rand_symmetric(40, seed=2)
            with es.options(scratch=es.scratch(nb=1, nbl=1)):
                with self.assertWarns(ScratchUndersizedWarning):
                    res = es.solve(mat)
            self.assertTrue(np.allclose(res.values, np.linalg.eigvalsh(mat)[::-1]))
            self.assertGreater(len(res.diagnostics), 0)
            stages = {diag.stage for diag in res.diagnostics}
            self.assertIn("diagonalize", stages)
            self.assertIn("tridiagonalize", stages)
            sytrd = [diag for diag in res.diagnostics if diag.stage == "tridiagonalize"]
            self.assertEqual(sytrd[0].routine, "sytrd")
            self.assertEqual(sytrd[0].kind, "real")
            self.assertEqual(sytrd[0].reserved, 40)
            for diag in res.diagnostics:
                self.assertGreater(diag.optimal, diag.reserved)
                self.assertEqual(diag.n, 40)

    def test_diagnostic_message(self):
        diag = ScratchDiagnostic(stage="tridiagonalize", routine="sytrd", kind="real",
                                 n=10, reserved=10, optimal=320)
        self.assertEqual(diag.suggested_block_factor, 32.0)
        self.assertIn("nb to 32", diag.message())
        diag = ScratchDiagnostic(stage="diagonalize", routine="stemr", kind="integer",
                                 n=10, reserved=10, optimal=80)
        self.assertIn("nbl to 8", diag.message())

    def test_solver_direct(self):
        solver = SymmetricEigenvalueSolver(scratch=ScratchPolicy(nb=1, nbl=1))
        mat = rand_symmetric(12, seed=3)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            res = solver(mat)
        self.assertTrue(any(issubclass(w.category, ScratchUndersizedWarning) for w in caught))
        self.assertGreater(len(res.diagnostics), 0)

if __name__ == "__main__":
    unittest.main()
