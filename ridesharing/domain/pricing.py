"""
Fare Pricing  (Strategy Pattern)
================================

Every trip currently costs a flat fare (default 25).  The strategy seam is
kept so the registry only ever asks for a quote and never hard-codes the
amount.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PricingStrategy(ABC):
    @abstractmethod
    def quote(self, start_location: str, end_location: str) -> float: ...


class FixedFarePricing(PricingStrategy):
    def __init__(self, fare: float = 25.0):
        if fare < 0:
            raise ValueError(f"Fare must be non-negative, got {fare}")
        self.fare = fare

    def quote(self, start_location: str, end_location: str) -> float:
        return self.fare
