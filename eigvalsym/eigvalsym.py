# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generic, Optional, TypeVar
from dataclasses import dataclass

from .backend import ArrayNamespace, get_namespace
from .triangle import Triangle
from .scratch import ScratchPolicy
from .tridiagonalization import Tridiagonalization
from .tridiagonaleigenvalues import TridiagonalEigenvalues
from .sytrdsolver import SytrdSolver
from .stemrsolver import StemrSolver
from .stebzsolver import StebzSolver
from .options import SolverOptions, get_options, set_options
from .symmetriceigenvaluesolver import SymmetricEigenvalueSolver, EigenvalueResult

NDArray = TypeVar("NDArray", bound=Any)

@dataclass(frozen=True)
class EigValSym(Generic[NDArray]):
    """
    Eigenvalues of real symmetric matrices for a given array namespace.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

    #-------------------------------------------------------------------------------------------------
    # computation

    def eigvalsym(
            self,
            mat: NDArray,
            n: Optional[int] = None,
            uplo: Optional[Triangle | str] = None,
            out: Optional[NDArray] = None) -> NDArray:
        """
        Eigenvalues of the symmetric matrix mat, ordered from greatest to least.
        Only the upper ('U', default) or lower ('L') triangle of mat is used. n is
        the order of the matrix and defaults to its number of rows. If out is given,
        the eigenvalues are written to its first n entries.
        """
        return self.solve(mat, n=n, uplo=uplo, out=out).values

    def solve(
            self,
            mat: NDArray,
            n: Optional[int] = None,
            uplo: Optional[Triangle | str] = None,
            out: Optional[NDArray] = None) -> EigenvalueResult[NDArray]:
        """
        Like eigvalsym, but also return the scratch diagnostics of the backend.
        """
        triangle = self.get_options().triangle if uplo is None else Triangle.parse(uplo)
        return self.solver()(mat, n=n, triangle=triangle, out=out)

    def solver(self) -> SymmetricEigenvalueSolver:
        """
        Solver configured by the options of the current thread.
        """
        opts = self.get_options()
        return SymmetricEigenvalueSolver(
            tridiagonalization=opts.tridiagonalization,
            eigenvalues=opts.eigenvalues,
            scratch=opts.scratch)

    #-------------------------------------------------------------------------------------------------
    # backend wrapper

    def scratch(self, nb: int = 80, nbl: int = 10) -> ScratchPolicy:
        """
        Block factors for the real (nb) and integer (nbl) scratch buffers.
        """
        return ScratchPolicy(nb=nb, nbl=nbl)

    def sytrd(self) -> SytrdSolver:
        """
        Householder tridiagonalization, LAPACK ?sytrd.
        """
        return SytrdSolver()

    def stemr(self) -> StemrSolver:
        """
        Tridiagonal eigenvalues by relatively robust representations, LAPACK ?stemr.
        """
        return StemrSolver()

    def stebz(self, abstol: float = 0.0) -> StebzSolver:
        """
        Tridiagonal eigenvalues by bisection, LAPACK ?stebz.
        """
        return StebzSolver(abstol=abstol)

    #-------------------------------------------------------------------------------------------------
    # options

    def options(
            self, *,
            uplo: Triangle | str = "U",
            scratch: Optional[ScratchPolicy] = None,
            tridiagonalization: Optional[Tridiagonalization] = None,
            eigenvalues: Optional[TridiagonalEigenvalues] = None) -> SolverOptions:
        """
        Solver options, to be used as context manager or with set_options.
        """
        return SolverOptions(
            namespace=self.namespace,
            triangle=uplo,
            scratch=scratch,
            tridiagonalization=tridiagonalization,
            eigenvalues=eigenvalues)

    def set_options(self, options: SolverOptions) -> None:
        """
        Set options for the current thread.
        """
        set_options(options)

    def get_options(self) -> SolverOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace)
