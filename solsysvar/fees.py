"""Calculation of transaction fees."""

from __future__ import annotations

from dataclasses import dataclass, field

from .clock import DEFAULT_MS_PER_SLOT
from .sysvar import Sysvar

DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE = 10_000
DEFAULT_TARGET_SIGNATURES_PER_SLOT = 50 * DEFAULT_MS_PER_SLOT
DEFAULT_BURN_PERCENT = 50


@dataclass(frozen=True)
class FeeCalculator:
    """Fee calculator for processing transactions."""

    lamports_per_signature: int


@dataclass
class FeeRateGovernor:
    """Governs the fee rate for the cluster."""

    lamports_per_signature: int = 0
    target_lamports_per_signature: int = DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE
    target_signatures_per_slot: int = DEFAULT_TARGET_SIGNATURES_PER_SLOT
    min_lamports_per_signature: int = 0
    max_lamports_per_signature: int = 0
    burn_percent: int = DEFAULT_BURN_PERCENT

    def create_fee_calculator(self) -> FeeCalculator:
        """Create a fee calculator from the current cost of a signature."""
        return FeeCalculator(self.lamports_per_signature)

    def burn(self, fees: int) -> tuple[int, int]:
        """Split a fee total into ``(unburned, burned)``."""
        burned = fees * self.burn_percent // 100
        return fees - burned, burned


@dataclass
class Fees(Sysvar):
    """Fees sysvar."""

    fee_calculator: FeeCalculator
    fee_rate_governor: FeeRateGovernor = field(default_factory=FeeRateGovernor)