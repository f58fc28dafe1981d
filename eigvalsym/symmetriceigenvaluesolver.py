# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic, Optional, TypeVar
from dataclasses import dataclass, field
from operator import index
import logging
import os
import warnings
import numpy as np

from .backend import ArrayLike, to_host, from_host
from .errors import AllocationFailure, BackendNumericalFailure, PreconditionViolation, ScratchUndersizedWarning
from .scratch import ScratchPolicy, ScratchDiagnostic
from .triangle import Triangle, DEFAULT_TRIANGLE
from .tridiagonalform import TridiagonalForm
from .tridiagonalization import Tridiagonalization
from .tridiagonaleigenvalues import TridiagonalEigenvalues
from .sytrdsolver import SytrdSolver
from .stemrsolver import StemrSolver
from .utils import check_extent

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(__file__)

T = TypeVar("T", bound=ArrayLike)

@dataclass(kw_only=True)
class EigenvalueResult(Generic[T]):
    #: Eigenvalues in descending order.
    values: T
    #: Scratch diagnostics reported by the backend during the call.
    diagnostics: list[ScratchDiagnostic] = field(default_factory=list)

@dataclass(kw_only=True)
class SymmetricEigenvalueSolver:
    """
    Eigenvalues of a real symmetric matrix, ordered from greatest to least. The matrix
    is reduced in two steps

    .. math:: A = Q T Q^T = Q (S \\Lambda S^T) Q^T

    where :math:`Q` is orthogonal, :math:`T` symmetric tridiagonal and :math:`\\Lambda`
    diagonal. Only the selected triangle of the input is read, the input itself is
    never modified.
    """

    #: Reduction of the working copy to tridiagonal form.
    tridiagonalization: Tridiagonalization = field(default_factory=SytrdSolver)
    #: Eigenvalue solver for the tridiagonal form.
    eigenvalues: TridiagonalEigenvalues = field(default_factory=StemrSolver)
    #: Sizing of the backend scratch buffers.
    scratch: ScratchPolicy = field(default_factory=ScratchPolicy)

    def __call__(
            self,
            mat: T,
            n: Optional[int] = None,
            triangle: Triangle | str = DEFAULT_TRIANGLE,
            out: Optional[T] = None) -> EigenvalueResult[T]:
        """
        Compute the eigenvalues of the leading n x n block of mat. If out is provided,
        its first n entries receive the eigenvalues and out is returned as values.
        On failure out is left untouched.
        """
        triangle = Triangle.parse(triangle)
        host = to_host(mat)
        n = self._check_input(host, n, out)
        diagnostics: list[ScratchDiagnostic] = []

        a = self._working_copy(host, n)
        form = self._tridiagonalize(a, n, triangle, diagnostics)
        del a
        vals = self._reorder(self._diagonalize(form, n, diagnostics))

        if out is None:
            return EigenvalueResult(values=from_host(vals, mat), diagnostics=diagnostics)
        out[:n] = from_host(vals.astype(to_host(out).dtype, copy=False), out)
        return EigenvalueResult(values=out, diagnostics=diagnostics)

    def _check_input(self, host: np.ndarray, n: Optional[int], out: Optional[ArrayLike]) -> int:
        if np.iscomplexobj(host):
            raise TypeError("Complex matrices are not supported, the input must be real symmetric.")
        if host.dtype.kind not in "fiub":
            raise TypeError(f"Unsupported matrix dtype {host.dtype}.")
        if host.ndim != 2:
            raise PreconditionViolation("mat", (1, 1), host.shape)

        n = host.shape[0] if n is None else index(n)
        if n <= 0:
            raise PreconditionViolation("n", (1,), (n,))
        check_extent("mat", (n, n), host.shape)
        if out is not None:
            out_dtype = to_host(out).dtype
            if out_dtype.kind != "f":
                raise TypeError(f"Output buffer must have a real floating dtype, got {out_dtype}.")
            check_extent("out", (n,), tuple(out.shape))
        return n

    def _working_copy(self, host: np.ndarray, n: int) -> np.ndarray:
        if host.dtype.kind == "f" and host.dtype.itemsize <= 4:
            dtype = np.float32
        else:
            dtype = np.float64
        try:
            return np.array(host[:n, :n], dtype=dtype, order="F", copy=True)
        except MemoryError as err:
            raise AllocationFailure("working copy", (n, n)) from err

    def _tridiagonalize(
            self,
            a: np.ndarray,
            n: int,
            triangle: Triangle,
            diagnostics: list[ScratchDiagnostic]) -> TridiagonalForm:
        lower = bool(triangle.lower)
        lwork = self.scratch.lwork(n)
        routine = self.tridiagonalization.routine
        logger.debug("tridiagonalize: %s n=%d triangle=%s lwork=%d", routine, n, triangle.value, lwork)

        optimal = self.tridiagonalization.optimal_lwork(n, lower, a.dtype)
        res = self.tridiagonalization(a, lower=lower, lwork=lwork)
        if res.info != 0:
            raise BackendNumericalFailure(
                "tridiagonalize", routine, res.info, "Problem tri-diagonalizing input matrix")

        if optimal > lwork:
            self._report(ScratchDiagnostic(
                stage="tridiagonalize", routine=routine, kind="real",
                n=n, reserved=lwork, optimal=optimal), diagnostics)
        return res.form

    def _diagonalize(self, form: TridiagonalForm, n: int, diagnostics: list[ScratchDiagnostic]) -> np.ndarray:
        lwork, liwork = self.scratch.lwork(n), self.scratch.liwork(n)
        routine = self.eigenvalues.routine
        opt_lwork, opt_liwork = self.eigenvalues.optimal_work(form)
        logger.debug("diagonalize: %s n=%d lwork=%d liwork=%d", routine, n, lwork, liwork)

        # the backend refuses to run below its required scratch
        res = self.eigenvalues(form, lwork=max(lwork, opt_lwork), liwork=max(liwork, opt_liwork))
        if res.info != 0:
            message, phase = self.eigenvalues.describe_info(res.info)
            raise BackendNumericalFailure(
                "diagonalize", routine, res.info,
                f"Problem determining eigenvalues of tridiagonal matrix. {message}",
                phase=phase)
        if res.count != n:
            raise BackendNumericalFailure(
                "diagonalize", routine, res.info,
                f"Backend returned {res.count} eigenvalues for a matrix of order {n}",
                count=res.count)

        if opt_lwork > lwork:
            self._report(ScratchDiagnostic(
                stage="diagonalize", routine=routine, kind="real",
                n=n, reserved=lwork, optimal=opt_lwork), diagnostics)
        if opt_liwork > liwork:
            self._report(ScratchDiagnostic(
                stage="diagonalize", routine=routine, kind="integer",
                n=n, reserved=liwork, optimal=opt_liwork), diagnostics)
        return np.asarray(res.values[:n])

    def _reorder(self, vals: np.ndarray) -> np.ndarray:
        # backends return ascending values, reversing is enough in that case
        vals = vals[::-1]
        order = np.argsort(-vals, kind="stable")
        return np.ascontiguousarray(vals[order])

    def _report(self, diagnostic: ScratchDiagnostic, diagnostics: list[ScratchDiagnostic]) -> None:
        diagnostics.append(diagnostic)
        logger.debug("scratch undersized: %s", diagnostic)
        warnings.warn(diagnostic.message(), ScratchUndersizedWarning, skip_file_prefixes=(_PACKAGE_DIR,))
