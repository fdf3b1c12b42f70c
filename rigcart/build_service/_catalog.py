"""
Build-service tiers offered alongside a full system build.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from rigcart._types import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Types
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class BuildServiceOption:
    id: str
    name: str
    fee: Money
    includes: tuple[str, ...]
    positioning: str
    ideal_for: str
    badge: str


class UnknownBuildService(LookupError):
    """A tier id outside the catalog reached the selector."""

    def __init__(self, tier_id: str) -> None:
        self.tier_id = tier_id
        known = ", ".join(option.id for option in BUILD_SERVICE_OPTIONS)
        super().__init__(f"Unknown build service tier {tier_id!r} (known: {known})")


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════

STANDARD_ASSEMBLY = BuildServiceOption(
    id="standard-assembly",
    name="Standard Assembly",
    fee=Decimal("85.00"),
    includes=(
        "Professional assembly of all selected components",
        "Cable management (functional, not showcase)",
        "BIOS update and system check",
        "Windows installation (if purchased)",
        "14-day build warranty",
    ),
    positioning="Straightforward, reliable, cost-effective.",
    ideal_for="Customers who want their parts put together correctly and ready to go.",
    badge="Great value",
)

PERFORMANCE_BUILD = BuildServiceOption(
    id="performance-build",
    name="Performance Build",
    fee=Decimal("130.00"),
    includes=(
        "All Standard Assembly features",
        "Advanced cable management with airflow optimisation",
        "Stress testing (CPU, GPU, RAM) for stability",
        "Thermal paste upgrade (premium compound)",
        "RGB lighting setup and sync",
        "1-month build support",
    ),
    positioning="Elevated service with polish and optimisation.",
    ideal_for="Gamers and creators who want assurance their system is tuned and looks sharp.",
    badge="Most popular",
)

ELITE_SHOWCASE = BuildServiceOption(
    id="elite-showcase",
    name="Elite Showcase Build",
    fee=Decimal("185.00"),
    includes=(
        "All Performance Build features",
        "Custom cable sleeving and aesthetic routing",
        "BIOS/firmware fine-tuning for performance",
        "Full benchmark report (FPS, temps, scores)",
        "Priority support for 6 months",
        "Extended build warranty (1 year)",
    ),
    positioning="VIP build, priority and attention to detail",
    ideal_for="Enthusiasts who want their PC to be a centerpiece, technically and visually.",
    badge="Fastest turnaround",
)

BUILD_SERVICE_OPTIONS: tuple[BuildServiceOption, ...] = (
    STANDARD_ASSEMBLY,
    PERFORMANCE_BUILD,
    ELITE_SHOWCASE,
)

DEFAULT_BUILD_SERVICE = PERFORMANCE_BUILD.id

_BY_ID = {option.id: option for option in BUILD_SERVICE_OPTIONS}


def build_service_option(tier_id: str) -> BuildServiceOption:
    try:
        return _BY_ID[tier_id]
    except KeyError:
        raise UnknownBuildService(tier_id) from None


__all__ = (
    "BuildServiceOption",
    "UnknownBuildService",
    "STANDARD_ASSEMBLY",
    "PERFORMANCE_BUILD",
    "ELITE_SHOWCASE",
    "BUILD_SERVICE_OPTIONS",
    "DEFAULT_BUILD_SERVICE",
    "build_service_option",
)
