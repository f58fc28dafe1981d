# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass
from scipy.linalg import get_lapack_funcs

from .tridiagonalform import TridiagonalForm
from .tridiagonaleigenvalues import TridiagonalEigenvaluesResult
from .utils import check_non_neg

@dataclass(kw_only=True)
class StebzSolver:
    """
    Eigenvalues of a symmetric tridiagonal matrix by bisection, LAPACK ``?stebz``.
    An absolute tolerance of zero lets the backend choose its default.
    ``?stebz`` manages its own workspace, so no scratch is requested from the caller.
    """

    abstol: float = 0.0

    routine = "stebz"

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "abstol":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__(self, form: TridiagonalForm, /, lwork: int, liwork: int) -> TridiagonalEigenvaluesResult:
        stebz, = get_lapack_funcs(("stebz",), (form.d,))
        # entire spectrum, ordered over the whole matrix
        m, w, _, _, info = stebz(form.d, form.padded_e(), 0, 0.0, 1.0, 1, form.n, self.abstol, "E")
        return TridiagonalEigenvaluesResult(values=w, count=int(m), info=int(info))

    def optimal_work(self, form: TridiagonalForm) -> tuple[int, int]:
        return 0, 0

    def describe_info(self, info: int) -> tuple[str, Optional[str]]:
        if info in (1, 3):
            return "Bisection failed to converge for some eigenvalues", None
        if info == 4:
            return "Gershgorin interval too small, no eigenvalues computed", None
        if info < 0:
            return f"Argument {-info} had an illegal value", None
        return "Problem determining eigenvalues of tridiagonal matrix", None
