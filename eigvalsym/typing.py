# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of eigvalsym."""

from .triangle import Triangle
from .scratch import ScratchPolicy, ScratchDiagnostic
from .tridiagonalform import TridiagonalForm

from .tridiagonalization import Tridiagonalization, TridiagonalizationResult
from .tridiagonaleigenvalues import TridiagonalEigenvalues, TridiagonalEigenvaluesResult
from .sytrdsolver import SytrdSolver
from .stemrsolver import StemrSolver
from .stebzsolver import StebzSolver

from .options import SolverOptions
from .symmetriceigenvaluesolver import SymmetricEigenvalueSolver, EigenvalueResult
from .eigvalsym import EigValSym
