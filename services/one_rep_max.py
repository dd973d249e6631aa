"""
One-Rep Max Estimation
Formula strategies for estimating a single-repetition maximum

Each formula is an interchangeable strategy with a single estimate()
capability, so analytics code can take any of them without caring which.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class InvalidInput(ValueError):
    """Raised when a caller passes values outside a formula's domain"""


class OneRepMaxStrategy(ABC):
    """Estimates a one-rep max from a weight lifted for a number of reps."""

    name: str = ""

    @abstractmethod
    def estimate(self, weight: float, reps: int) -> float:
        """
        Args:
            weight: Weight lifted (any consistent unit)
            reps: Consecutive reps completed at that weight

        Returns:
            Estimated 1RM in the same unit as weight

        Raises:
            InvalidInput: If reps is outside the formula's domain
        """


class EpleyStrategy(OneRepMaxStrategy):
    """
    Epley formula: 1RM = weight * (1 + reps / 30)

    A single rep is returned as-is rather than extrapolated.
    """

    name = "epley"

    def estimate(self, weight: float, reps: int) -> float:
        if reps < 1:
            raise InvalidInput(f"Reps must be >= 1, got {reps}")
        if reps == 1:
            return weight
        return weight * (1 + reps / 30.0)


class BrzyckiStrategy(OneRepMaxStrategy):
    """Brzycki formula: 1RM = weight * 36 / (37 - reps)"""

    name = "brzycki"

    def estimate(self, weight: float, reps: int) -> float:
        if reps < 1:
            raise InvalidInput(f"Reps must be >= 1, got {reps}")
        if reps >= 37:
            raise InvalidInput(f"Brzycki formula is undefined for {reps} reps")
        if reps == 1:
            return weight
        return weight * (36 / (37 - reps))


STRATEGIES: Dict[str, OneRepMaxStrategy] = {
    EpleyStrategy.name: EpleyStrategy(),
    BrzyckiStrategy.name: BrzyckiStrategy(),
}


def get_strategy(name: str) -> OneRepMaxStrategy:
    """Look up a formula strategy by name (case-insensitive)."""
    try:
        return STRATEGIES[name.lower()]
    except KeyError:
        raise InvalidInput(
            f"Unknown 1RM formula '{name}'. Available: {', '.join(sorted(STRATEGIES))}"
        ) from None


def estimate_one_rep_max(
    weight: float,
    reps: int,
    strategy: Optional[OneRepMaxStrategy] = None
) -> float:
    """
    Calculate estimated 1RM.

    Args:
        weight: Weight lifted
        reps: Number of reps, must be >= 1
        strategy: Formula to use (Epley when omitted)

    Returns:
        Estimated 1RM
    """
    strategy = strategy or STRATEGIES[EpleyStrategy.name]
    return strategy.estimate(weight, reps)
