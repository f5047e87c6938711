from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from stripe_entities.domain.entities.base import Entity
from stripe_entities.domain.enums import ElementAppearanceLabel, ElementTheme
from stripe_entities.domain.schema import wire_field


@dataclass(frozen=True, slots=True, kw_only=True)
class ElementAppearance(Entity):
    """Appearance configuration for Stripe Elements.

    ``variables`` maps variable names (``colorPrimary``, ``fontFamily``) to
    CSS values. ``rules`` maps selectors (``.Input``, ``.Tab:focus``) to
    property/value pairs.

    Unknown ``theme`` and ``label`` values decode to the fallback member so
    that newly added themes do not break existing integrations.
    """

    theme: ElementTheme = wire_field(fallback=ElementTheme.STRIPE)
    variables: Mapping[str, str] | None = None
    rules: Mapping[str, Mapping[str, str]] | None = None
    label: ElementAppearanceLabel = wire_field(fallback=ElementAppearanceLabel.ABOVE)
