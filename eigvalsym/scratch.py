# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Literal
from dataclasses import dataclass
from operator import index
from .utils import check_pos

@dataclass(kw_only=True)
class ScratchPolicy:
    """
    Sizing of the backend scratch buffers. Real scratch holds nb*n elements and
    integer scratch nbl*n elements. Larger block factors trade memory for the
    blocked, faster execution paths of the backend.
    """

    #: Block factor of the real scratch buffer.
    nb: int = 80
    #: Block factor of the integer scratch buffer.
    nbl: int = 10

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("nb", "nbl"):
            value = index(value)
            check_pos(name, value)
        super().__setattr__(name, value)

    def lwork(self, n: int) -> int:
        """Reserved real scratch for order n."""
        return max(1, self.nb * n)

    def liwork(self, n: int) -> int:
        """Reserved integer scratch for order n."""
        return max(1, self.nbl * n)

@dataclass(frozen=True, kw_only=True)
class ScratchDiagnostic:
    """The backend reported that it would have preferred more scratch than was reserved."""

    #: Pipeline stage the diagnostic belongs to.
    stage: str
    #: LAPACK routine that was queried.
    routine: str
    #: Kind of scratch buffer.
    kind: Literal["real", "integer"]
    #: Order of the matrix.
    n: int
    #: Number of elements reserved.
    reserved: int
    #: Number of elements the backend asked for.
    optimal: int

    @property
    def suggested_block_factor(self) -> float:
        return self.optimal / max(self.n, 1)

    def message(self) -> str:
        name = "nb" if self.kind == "real" else "nbl"
        return (f"{self.routine} ({self.stage}) would use {self.optimal} {self.kind} scratch "
                f"elements, {self.reserved} reserved. Consider changing the value of {name} "
                f"to {self.suggested_block_factor:g}.")
