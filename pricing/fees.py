"""
Nomination Fee Resolution.

Each designation type has its own fee. The fee is looked up along a
precedence chain: the therapist's own override, then the shop default,
then zero. A zero override counts as 'not set'.
"""

from typing import Optional

from models import DesignationType, ShopDefaults, TherapistPricing

# designation -> (therapist override field, shop default field)
FEE_FIELDS = {
    DesignationType.NOMINATION: ("nomination_fee", "default_nomination_fee"),
    DesignationType.CONFIRMED_NOMINATION: ("confirmed_nomination_fee", "default_confirmed_nomination_fee"),
    DesignationType.PRINCESS_RESERVATION: ("princess_reservation_fee", "default_princess_reservation_fee"),
}


class NominationFeeResolver:
    """Resolves the fee owed for a designation. Callers supply fetched records."""

    def resolve(
        self,
        designation: DesignationType,
        therapist_pricing: Optional[TherapistPricing],
        shop_defaults: Optional[ShopDefaults]
    ) -> int:
        fields = FEE_FIELDS.get(designation)
        if fields is None:
            return 0  # Free designation never carries a fee

        override_field, default_field = fields

        override = getattr(therapist_pricing, override_field, None) if therapist_pricing else None
        if override:
            return override

        default = getattr(shop_defaults, default_field, 0) if shop_defaults else 0
        return default or 0
