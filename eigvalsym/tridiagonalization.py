# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, Any
from dataclasses import dataclass
import numpy as np
from .tridiagonalform import TridiagonalForm

@dataclass(kw_only=True)
class TridiagonalizationResult:
    #: Tridiagonal form of the input matrix.
    form: TridiagonalForm
    #: Status code of the backend, zero on success.
    info: int

class Tridiagonalization(Protocol):
    """Protocol for a reduction of a symmetric matrix to tridiagonal form."""

    #: Name of the backend routine, used in diagnostics.
    routine: str

    def __call__(self, a: np.ndarray, /, lower: bool, lwork: int) -> TridiagonalizationResult:
        """
        Reduce the selected triangle of the square matrix a. a may be overwritten.
        """
        ...

    def optimal_lwork(self, n: int, lower: bool, dtype: Any) -> int:
        """Real scratch size the backend would prefer for order n."""
        ...
