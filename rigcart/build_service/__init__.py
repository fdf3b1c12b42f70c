"""
Build service — optional paid assembly for complete builds.

    from rigcart import build_service as B

    offer = B.offer_build_service(cart, B.BuildServiceChoice("standard-assembly"))
    offer.eligible   # full build detected
    offer.fee        # 85.00, or 0 when opted out / not offered
"""

from rigcart.build_service._catalog import (
    BuildServiceOption,
    UnknownBuildService,
    STANDARD_ASSEMBLY,
    PERFORMANCE_BUILD,
    ELITE_SHOWCASE,
    BUILD_SERVICE_OPTIONS,
    DEFAULT_BUILD_SERVICE,
    build_service_option,
)
from rigcart.build_service._select import (
    CORE_CATEGORIES,
    CHASSIS_CATEGORIES,
    FULL_BUILD_MIN_QUANTITY,
    BuildServiceChoice,
    BuildServiceOffer,
    is_full_build,
    offer_build_service,
)

__all__ = (
    # Catalog
    "BuildServiceOption",
    "UnknownBuildService",
    "STANDARD_ASSEMBLY",
    "PERFORMANCE_BUILD",
    "ELITE_SHOWCASE",
    "BUILD_SERVICE_OPTIONS",
    "DEFAULT_BUILD_SERVICE",
    "build_service_option",
    # Selection
    "CORE_CATEGORIES",
    "CHASSIS_CATEGORIES",
    "FULL_BUILD_MIN_QUANTITY",
    "BuildServiceChoice",
    "BuildServiceOffer",
    "is_full_build",
    "offer_build_service",
)
