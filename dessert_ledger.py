from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

logger = logging.getLogger("dessert.ledger")

@dataclass(frozen=True)
class Tier:
    """One dessert: the image shown, the price it sells for, and how many
    desserts must be sold before it starts being produced."""

    image_id: str
    price: int
    threshold: int

# Ordered by threshold; the first dessert is produced from the start.
TIERS: Tuple[Tier, ...] = (
    Tier("cupcake", 5, 0),
    Tier("donut", 10, 5),
    Tier("eclair", 15, 20),
    Tier("froyo", 30, 50),
    Tier("gingerbread", 50, 100),
    Tier("honeycomb", 100, 200),
    Tier("icecreamsandwich", 500, 500),
    Tier("jellybean", 1000, 1000),
    Tier("kitkat", 2000, 2000),
    Tier("lollipop", 3000, 4000),
    Tier("marshmallow", 4000, 8000),
    Tier("nougat", 5000, 16000),
    Tier("oreo", 6000, 20000),
)

SHARE_TEXT = "I've clicked {units_sold} Desserts for a total of {revenue}$ #AndroidDessertPusher"

def tier_index_for(units_sold: int) -> int:
    index = 0
    for i, tier in enumerate(TIERS):
        if units_sold >= tier.threshold:
            index = i
        else:
            break
    return index

class SaleLedger:
    def __init__(self) -> None:
        self.units_sold = 0
        self.revenue = 0
        self.current_tier_index = 0

    def current_tier(self) -> Tier:
        return TIERS[self.current_tier_index]

    def record_sale(self, on_tier_changed: Optional[Callable[[Tier], None]] = None) -> Tuple[int, int]:
        self.revenue += TIERS[self.current_tier_index].price
        self.units_sold += 1
        index = tier_index_for(self.units_sold)
        if index != self.current_tier_index:
            self.current_tier_index = index
            tier = TIERS[index]
            logger.info("Now producing %s at %d sold", tier.image_id, self.units_sold)
            if on_tier_changed is not None:
                on_tier_changed(tier)
        return self.units_sold, self.revenue

    def share_summary(self) -> str:
        return SHARE_TEXT.format(units_sold=self.units_sold, revenue=self.revenue)
