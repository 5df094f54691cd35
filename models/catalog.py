"""
Catalog and pricing-input data models for the Salon Timeline Engine.

This module defines the 'Price List' side of the system:
1. Courses and Options (what the customer buys)
2. Designation types (how the therapist was chosen)
3. Fee tables (per-therapist overrides and shop-level defaults)
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class DesignationType(str, Enum):
    """How a reservation was nominated. Each type carries its own fee."""
    FREE = "free"
    NOMINATION = "nomination"
    CONFIRMED_NOMINATION = "confirmed"     # Repeat customer of the same therapist
    PRINCESS_RESERVATION = "princess"


class Course(BaseModel):
    """A bookable treatment course. Immutable input to pricing."""
    id: str = Field(description="Unique identifier")
    name: str = Field(default="", description="Display name")
    duration_minutes: int = Field(ge=0, description="Length of the course itself")
    base_price: int = Field(ge=0, description="Price in whole currency units")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "course_60",
            "name": "Standard 60",
            "duration_minutes": 60,
            "base_price": 6000
        }
    })


class Option(BaseModel):
    """Add-on selected on top of a course. Contributes to duration and price."""
    id: str = Field(description="Unique identifier")
    name: str = Field(default="", description="Display name")
    duration_minutes: int = Field(default=0, ge=0)
    price: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class TherapistPricing(BaseModel):
    """
    Per-therapist fee overrides.
    A missing or zero field means 'use the shop default'.
    """
    therapist_id: str = Field(description="Therapist the overrides belong to")
    nomination_fee: Optional[int] = Field(default=None, ge=0)
    confirmed_nomination_fee: Optional[int] = Field(default=None, ge=0)
    princess_reservation_fee: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "therapist_id": "th_01",
            "nomination_fee": 1000,
            "confirmed_nomination_fee": 0,
            "princess_reservation_fee": None
        }
    })


class ShopDefaults(BaseModel):
    """Shop-level fallback fees used when a therapist has no override."""
    shop_id: Optional[str] = Field(default=None, description="Shop the defaults belong to")
    default_nomination_fee: int = Field(default=0, ge=0)
    default_confirmed_nomination_fee: int = Field(default=0, ge=0)
    default_princess_reservation_fee: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)
