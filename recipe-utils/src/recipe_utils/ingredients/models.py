import dataclasses
from typing import Optional


@dataclasses.dataclass
class ParsedIngredient:
    quantity: Optional[float]
    unit: Optional[str]
    name: str
    original: str  # trimmed input, kept verbatim for display
