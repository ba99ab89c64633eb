"""Domain model for a crystallographic unit cell."""

from dataclasses import dataclass, field
import numpy as np


@dataclass(frozen=True)
class UnitCell:
    """
    Parallelepiped defined by three edge lengths and three angles.

    Lengths are in the same units as the Cartesian atom positions.
    Angles are stored in radians: alpha between b and c, beta between
    a and c, gamma between a and b.
    """

    a: float
    b: float
    c: float
    alpha: float
    beta: float
    gamma: float
    _matrix: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate parameters and build the lattice matrix."""
        for name in ("a", "b", "c"):
            if not getattr(self, name) > 0.0:
                raise ValueError(f"Unit cell length {name} must be > 0")
        for name in ("alpha", "beta", "gamma"):
            angle = getattr(self, name)
            if not 0.0 < angle < np.pi:
                raise ValueError(f"Unit cell angle {name} must be in (0, pi) radians")

        cos_a, cos_b, cos_g = np.cos(self.alpha), np.cos(self.beta), np.cos(self.gamma)
        sin_g = np.sin(self.gamma)
        volume_term = 1.0 - cos_a**2 - cos_b**2 - cos_g**2 + 2.0 * cos_a * cos_b * cos_g
        if volume_term <= 0.0:
            raise ValueError("Unit cell angles do not describe a valid parallelepiped")

        # Row vectors: a along x, b in the xy plane.
        matrix = np.array(
            [
                [self.a, 0.0, 0.0],
                [self.b * cos_g, self.b * sin_g, 0.0],
                [
                    self.c * cos_b,
                    self.c * (cos_a - cos_b * cos_g) / sin_g,
                    self.c * np.sqrt(volume_term) / sin_g,
                ],
            ]
        )
        object.__setattr__(self, "_matrix", matrix)

    @classmethod
    def from_degrees(
        cls, a: float, b: float, c: float, alpha: float, beta: float, gamma: float
    ) -> "UnitCell":
        """Create a cell from angles given in degrees."""
        return cls(
            a=a,
            b=b,
            c=c,
            alpha=float(np.radians(alpha)),
            beta=float(np.radians(beta)),
            gamma=float(np.radians(gamma)),
        )

    @property
    def cell_matrix(self) -> np.ndarray:
        """Lattice vectors as rows of a 3x3 array."""
        return self._matrix.copy()

    @property
    def volume(self) -> float:
        return float(abs(np.linalg.det(self._matrix)))

    def angles_degrees(self) -> tuple:
        return (
            float(np.degrees(self.alpha)),
            float(np.degrees(self.beta)),
            float(np.degrees(self.gamma)),
        )

    def to_cartesian(self, fractional) -> np.ndarray:
        """
        Convert fractional coordinates to Cartesian positions.

        Args:
            fractional: Array-like of shape (3,) or (n, 3)

        Returns:
            numpy array with the same shape as the input
        """
        return np.asarray(fractional, dtype=float) @ self._matrix

    def to_fractional(self, cartesian) -> np.ndarray:
        """
        Convert Cartesian positions to fractional coordinates.

        Args:
            cartesian: Array-like of shape (3,) or (n, 3)

        Returns:
            numpy array with the same shape as the input
        """
        return np.linalg.solve(
            self._matrix.T, np.asarray(cartesian, dtype=float).T
        ).T
