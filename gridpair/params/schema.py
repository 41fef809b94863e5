"""Parameter schema with validation."""

from dataclasses import dataclass, field, asdict
from typing import Any

from gridpair.solvers.protocol import SolverVariant


class ValidationError(ValueError):
    """Parameter validation failed."""
    pass


def _positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def _non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class SearchParams:
    """Search: solver (variant name), shuffle (random fold order), seed."""
    solver: str = "grid"
    shuffle: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        try:
            SolverVariant.from_name(self.solver)
        except ValueError as e:
            raise ValidationError(str(e)) from None
        if self.seed is not None and self.seed < 0:
            raise ValidationError(f"seed must be non-negative, got {self.seed}")

    @property
    def variant(self) -> SolverVariant:
        return SolverVariant.from_name(self.solver)


@dataclass(frozen=True)
class OracleParams:
    """Oracle cross-check: check (enable), rtol, atol."""
    check: bool = False
    rtol: float = 1e-9
    atol: float = 1e-12

    def __post_init__(self) -> None:
        _non_negative(self.rtol, "rtol")
        _non_negative(self.atol, "atol")


@dataclass(frozen=True)
class RandomPointsParams:
    """Random input: n (point count), low/high (coordinate bounds)."""
    n: int = 1000
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        if self.n < 2:
            raise ValidationError(f"n must be >= 2, got {self.n}")
        _positive(self.high - self.low, "high - low")

    @property
    def side(self) -> float:
        return self.high - self.low


@dataclass(frozen=True)
class GridPairConfig:
    """Complete run configuration."""

    search: SearchParams = field(default_factory=SearchParams)
    oracle: OracleParams = field(default_factory=OracleParams)
    random_points: RandomPointsParams = field(default_factory=RandomPointsParams)

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested dictionary."""
        return {
            "search": asdict(self.search),
            "oracle": asdict(self.oracle),
            "random_points": asdict(self.random_points),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridPairConfig":
        """Create from nested dictionary."""
        param_classes = {
            "search": SearchParams,
            "oracle": OracleParams,
            "random_points": RandomPointsParams,
        }
        unknown = set(data) - set(param_classes)
        if unknown:
            raise ValidationError(f"Unknown parameter group(s): {sorted(unknown)}")
        kwargs = {}
        for key, values in data.items():
            try:
                kwargs[key] = param_classes[key](**(values or {}))
            except TypeError as e:
                raise ValidationError(f"Invalid parameters for {key}: {e}") from None
        return cls(**kwargs)

    def with_updates(self, **kwargs: Any) -> "GridPairConfig":
        """Create new config with updates."""
        current = self.to_dict()
        for key, value in kwargs.items():
            if key not in current:
                raise ValidationError(f"Unknown parameter group: {key}")
            if isinstance(value, dict):
                current[key].update(value)
            else:
                current[key] = asdict(value)
        return self.from_dict(current)

    # Convenience accessors
    @property
    def variant(self) -> SolverVariant:
        return self.search.variant
