"""
Unit conversion helpers.

Volumes are normalised to millilitres and weights to grams. Count units
(``Each``) and unknown units have no base value.
"""
from typing import Optional, Union

from app.models.shared.enums import UnitKind

Number = Union[int, float]

VOLUME_TO_ML = {
    "ml": 1,
    "L": 1000,
    "Gallon": 3785.41,
    "fl oz": 29.5735,
}

WEIGHT_TO_GRAMS = {
    "g": 1,
    "kg": 1000,
    "lb": 453.592,
    "oz": 28.3495,
}

COUNT_UNITS = ["Each"]

BASE_UNIT_LABELS = {
    UnitKind.VOLUME: "ml",
    UnitKind.WEIGHT: "g",
    UnitKind.COUNT: "unit",
}


def convert_to_base_unit(value: Optional[Number], unit: Optional[str]) -> Optional[float]:
    """Convert ``value`` expressed in ``unit`` to ml or g.

    Returns None for count units, unknown units, or a missing value/unit.
    """
    if not value or not unit:
        return None
    if unit in COUNT_UNITS:
        return None
    if unit in VOLUME_TO_ML:
        return float(value) * VOLUME_TO_ML[unit]
    if unit in WEIGHT_TO_GRAMS:
        return float(value) * WEIGHT_TO_GRAMS[unit]
    return None


def get_unit_type(unit: Optional[str]) -> UnitKind:
    if unit in VOLUME_TO_ML:
        return UnitKind.VOLUME
    if unit in WEIGHT_TO_GRAMS:
        return UnitKind.WEIGHT
    if unit in COUNT_UNITS:
        return UnitKind.COUNT
    return UnitKind.UNKNOWN


def get_base_unit_label(unit: Optional[str]) -> str:
    return BASE_UNIT_LABELS.get(get_unit_type(unit), "")
