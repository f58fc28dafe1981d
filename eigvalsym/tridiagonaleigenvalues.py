# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, Optional
from dataclasses import dataclass
import numpy as np
from .tridiagonalform import TridiagonalForm

@dataclass(kw_only=True)
class TridiagonalEigenvaluesResult:
    #: Eigenvalues, only the first count entries are valid.
    values: np.ndarray
    #: Number of eigenvalues found.
    count: int
    #: Status code of the backend, zero on success.
    info: int

class TridiagonalEigenvalues(Protocol):
    """
    Protocol for an eigenvalue solver of symmetric tridiagonal matrices. Implementations
    compute eigenvalues only, over the entire spectrum.
    """

    #: Name of the backend routine, used in diagnostics.
    routine: str

    def __call__(self, form: TridiagonalForm, /, lwork: int, liwork: int) -> TridiagonalEigenvaluesResult:
        ...

    def optimal_work(self, form: TridiagonalForm) -> tuple[int, int]:
        """Real and integer scratch sizes the backend would prefer."""
        ...

    def describe_info(self, info: int) -> tuple[str, Optional[str]]:
        """Message and failing internal phase for a nonzero status code."""
        ...
