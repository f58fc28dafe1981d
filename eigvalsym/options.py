# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
from copy import deepcopy
import threading

from .backend import ArrayNamespace
from .triangle import Triangle, DEFAULT_TRIANGLE
from .scratch import ScratchPolicy
from .tridiagonalization import Tridiagonalization
from .tridiagonaleigenvalues import TridiagonalEigenvalues
from .sytrdsolver import SytrdSolver
from .stemrsolver import StemrSolver

class SolverOptions:
    """
    Context manager for the eigenvalue solver options. Options are stored per
    namespace and per thread, nested managers restore the previous options on exit.
    """

    key: Hashable

    #: Triangle used when the caller does not select one.
    triangle: Triangle
    #: Block factors of the backend scratch buffers.
    scratch: ScratchPolicy
    #: Reduction to tridiagonal form.
    tridiagonalization: Tridiagonalization
    #: Eigenvalue solver for the tridiagonal form.
    eigenvalues: TridiagonalEigenvalues

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            triangle: Triangle | str = DEFAULT_TRIANGLE,
            scratch: Optional[ScratchPolicy] = None,
            tridiagonalization: Optional[Tridiagonalization] = None,
            eigenvalues: Optional[TridiagonalEigenvalues] = None):
        self.triangle = Triangle.parse(triangle)
        self.scratch = deepcopy(scratch) if scratch is not None else ScratchPolicy()
        self.tridiagonalization = deepcopy(tridiagonalization) if tridiagonalization is not None else SytrdSolver()
        self.eigenvalues = deepcopy(eigenvalues) if eigenvalues is not None else StemrSolver()
        self.key = (namespace, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        self.key = (self.key[0], threading.get_ident())
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

    def __repr__(self) -> str:
        return (f"SolverOptions(triangle={self.triangle}, scratch={self.scratch}, "
                f"tridiagonalization={self.tridiagonalization}, eigenvalues={self.eigenvalues})")

_opts: dict[Any, SolverOptions] = {}

def get_options(namespace: ArrayNamespace) -> SolverOptions:
    """Options of the current thread, defaults if none have been set."""
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key]
    return SolverOptions(namespace=namespace)

def set_options(opts: SolverOptions) -> None:
    global _opts
    key = (opts.key[0], threading.get_ident())
    opts.key = key
    _opts[key] = opts
