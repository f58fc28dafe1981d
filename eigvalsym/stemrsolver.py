# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
from scipy.linalg import get_lapack_funcs

from .tridiagonalform import TridiagonalForm
from .tridiagonaleigenvalues import TridiagonalEigenvaluesResult

# range flag of ?stemr for the entire spectrum
_ALL = 0

class StemrSolver:
    """
    Eigenvalues of a symmetric tridiagonal matrix with the relatively robust
    representation algorithm, LAPACK ``?stemr``. The tolerance is chosen by the
    backend itself.
    """

    routine: str = "stemr"

    def __call__(self, form: TridiagonalForm, /, lwork: int, liwork: int) -> TridiagonalEigenvaluesResult:
        stemr, = get_lapack_funcs(("stemr",), (form.d,))
        n = form.n
        m, w, _, info = stemr(form.d, form.padded_e(), _ALL, 0.0, 1.0, 1, n,
                              compute_v=0, lwork=lwork, liwork=liwork)
        return TridiagonalEigenvaluesResult(values=w, count=int(m), info=int(info))

    def optimal_work(self, form: TridiagonalForm) -> tuple[int, int]:
        stemr_lwork, = get_lapack_funcs(("stemr_lwork",), (form.d,))
        work, iwork, info = stemr_lwork(form.d, form.padded_e(), _ALL, 0.0, 1.0, 1, form.n,
                                        compute_v=0)
        if info != 0:
            return 0, 0
        return int(work), int(iwork)

    def describe_info(self, info: int) -> tuple[str, Optional[str]]:
        if info == 1 or 10 <= info < 20:
            return "Internal error in DLARRE", "DLARRE"
        if info == 2 or 20 <= info < 30:
            return "Internal error in DLARRV", "DLARRV"
        if info < 0:
            return f"Argument {-info} had an illegal value", None
        return "Problem determining eigenvalues of tridiagonal matrix", None

    def __repr__(self) -> str:
        return "StemrSolver()"
