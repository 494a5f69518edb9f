from dataclasses import dataclass
from typing import Dict, List, Literal

MetalType = Literal["gold", "silver", "copper", "platinum"]


@dataclass(frozen=True)
class Metal:
    """
    Declarative metal definition.
    """
    id: MetalType
    name: str
    symbol: str
    unit: str


GOLD = Metal(id="gold", name="Gold", symbol="XAU", unit="oz")
SILVER = Metal(id="silver", name="Silver", symbol="XAG", unit="oz")
COPPER = Metal(id="copper", name="Copper", symbol="XCU", unit="lb")
PLATINUM = Metal(id="platinum", name="Platinum", symbol="XPT", unit="oz")


# Iteration order matters for metal detection
ALL_METALS: Dict[str, Metal] = {
    GOLD.id: GOLD,
    SILVER.id: SILVER,
    COPPER.id: COPPER,
    PLATINUM.id: PLATINUM,
}

# Generic market terms map to the precious metals only
GENERIC_METALS: List[MetalType] = ["gold", "silver", "platinum"]

DEFAULT_METALS: List[MetalType] = ["gold"]
