from __future__ import annotations

from enum import Enum, unique


@unique
class ElementTheme(Enum):
    """Base theme of Stripe Elements."""

    STRIPE = "stripe"
    NIGHT = "night"
    FLAT = "flat"
    NONE = "none"


@unique
class ElementAppearanceLabel(Enum):
    """Position of input labels within Elements."""

    ABOVE = "above"
    FLOATING = "floating"
