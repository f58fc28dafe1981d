# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from enum import Enum
from typing import Self

class Triangle(Enum):
    """Triangle of a symmetric matrix that holds valid data."""

    UPPER = "U"
    LOWER = "L"

    @property
    def lower(self) -> int:
        """Flag as expected by the LAPACK wrappers of scipy."""
        return 1 if self is Triangle.LOWER else 0

    @classmethod
    def parse(cls, value: "Triangle | str") -> Self:
        """Accept a Triangle or one of "U", "L", "upper", "lower" (case insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in ("U", "UPPER"):
                return cls.UPPER
            if key in ("L", "LOWER"):
                return cls.LOWER
        raise ValueError(f"Unknown triangle {value!r}, expected 'U' or 'L'.")

DEFAULT_TRIANGLE = Triangle.UPPER
