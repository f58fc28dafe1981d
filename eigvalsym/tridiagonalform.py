# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass
import numpy as np

@dataclass(kw_only=True)
class TridiagonalForm:
    """
    Symmetric tridiagonal matrix :math:`T` of the reduction :math:`A = Q T Q^T`.
    """

    #: Diagonal, length n.
    d: np.ndarray
    #: Off-diagonal, length n-1.
    e: np.ndarray
    #: Scale factors of the Householder reflectors defining :math:`Q`, length n-1.
    tau: np.ndarray

    @property
    def n(self) -> int:
        return self.d.shape[0]

    def padded_e(self) -> np.ndarray:
        """Off-diagonal padded to length n, the last element is unused."""
        e = np.zeros(self.n, dtype=self.d.dtype)
        e[:self.n-1] = self.e
        return e

    def to_dense(self) -> np.ndarray:
        mat = np.diag(self.d)
        if self.n > 1:
            idx = np.arange(self.n - 1)
            mat[idx, idx+1] = self.e
            mat[idx+1, idx] = self.e
        return mat
