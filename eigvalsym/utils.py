# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .errors import PreconditionViolation

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be non-negative, got {value}")

def check_extent(what: str, expected: tuple[int, ...], actual: tuple[int, ...]) -> None:
    """Raise if any extent of ``actual`` is smaller than the matching one of ``expected``."""
    if len(actual) != len(expected) or any(a < e for a, e in zip(actual, expected)):
        raise PreconditionViolation(what, expected, actual)
