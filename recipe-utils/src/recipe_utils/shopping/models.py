import dataclasses
from typing import List, Optional


@dataclasses.dataclass
class ShoppingEntry:
    quantity: Optional[float]
    unit: Optional[str]
    recipe_name: str
    original: str


@dataclasses.dataclass
class ShoppingItem:
    """One line of a shopping list, merged across recipes."""

    name: str  # grouping name
    display_name: str  # first-seen parsed name
    entries: List[ShoppingEntry] = dataclasses.field(default_factory=list)
    combined: str = ""
