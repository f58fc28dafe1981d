# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import numpy as np
from scipy.linalg import get_lapack_funcs

from .tridiagonalform import TridiagonalForm
from .tridiagonalization import TridiagonalizationResult

class SytrdSolver:
    """
    Householder reduction :math:`A = Q T Q^T` of a real symmetric matrix with LAPACK ``?sytrd``.
    Only the selected triangle of the input is referenced.
    """

    routine: str = "sytrd"

    def __call__(self, a: np.ndarray, /, lower: bool, lwork: int) -> TridiagonalizationResult:
        sytrd, = get_lapack_funcs(("sytrd",), (a,))
        _, d, e, tau, info = sytrd(a, lower=int(lower), lwork=max(1, lwork), overwrite_a=1)
        return TridiagonalizationResult(form=TridiagonalForm(d=d, e=e, tau=tau), info=int(info))

    def optimal_lwork(self, n: int, lower: bool, dtype: Any) -> int:
        sytrd_lwork, = get_lapack_funcs(("sytrd_lwork",), dtype=np.dtype(dtype))
        work, info = sytrd_lwork(n, lower=int(lower))
        if info != 0:
            return 0
        return int(work)

    def __repr__(self) -> str:
        return "SytrdSolver()"
