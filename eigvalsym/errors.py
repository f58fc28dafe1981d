# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Exceptions and warnings raised by the eigenvalue solver."""

from typing import Optional

class EigValSymError(Exception):
    """Base class of all errors raised by eigvalsym."""

class PreconditionViolation(EigValSymError, ValueError):
    """
    An input or output array is smaller than the requested order, or the order
    itself is invalid. Raised before any backend routine is called.
    """

    #: Name of the offending argument.
    what: str
    #: Minimal extents required by the order.
    expected: tuple[int, ...]
    #: Extents actually provided.
    actual: tuple[int, ...]

    def __init__(self, what: str, expected: tuple[int, ...], actual: tuple[int, ...]) -> None:
        self.what = what
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            f"{what} must be dimensioned as {self.expected}, "
            f"input array is dimensioned as {self.actual}")

class AllocationFailure(EigValSymError, MemoryError):
    """Working storage for the solver could not be obtained."""

    def __init__(self, what: str, shape: tuple[int, ...]) -> None:
        self.what = what
        self.shape = tuple(shape)
        super().__init__(f"Problem allocating {what} of shape {self.shape}")

class BackendNumericalFailure(EigValSymError, ArithmeticError):
    """A LAPACK routine reported a failure, or returned inconsistent results."""

    #: Pipeline stage, either "tridiagonalize" or "diagonalize".
    stage: str
    #: Name of the LAPACK routine.
    routine: str
    #: Status code returned by the routine.
    info: int
    #: Internal phase of the routine that failed, if the code identifies one.
    phase: Optional[str]
    #: Number of eigenvalues returned, if the failure is a count mismatch.
    count: Optional[int]

    def __init__(
            self,
            stage: str,
            routine: str,
            info: int,
            message: str,
            phase: Optional[str] = None,
            count: Optional[int] = None) -> None:
        self.stage = stage
        self.routine = routine
        self.info = info
        self.phase = phase
        self.count = count
        super().__init__(f"{stage} ({routine}, info={info}): {message}")

class ScratchUndersizedWarning(RuntimeWarning):
    """The backend would have preferred more scratch space than was reserved."""
