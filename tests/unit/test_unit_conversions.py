import pytest
from app.models.shared.enums import UnitKind
from app.utils.unit_conversions import convert_to_base_unit, get_base_unit_label, get_unit_type

class TestConvertToBaseUnit:
    def test_volume_to_ml(self):
        assert convert_to_base_unit(750, "ml") == 750
        assert convert_to_base_unit(1.5, "L") == 1500
        assert convert_to_base_unit(1, "Gallon") == pytest.approx(3785.41)

    def test_weight_to_grams(self):
        assert convert_to_base_unit(2, "kg") == 2000
        assert convert_to_base_unit(1, "lb") == pytest.approx(453.592)

    def test_count_and_unknown_units(self):
        assert convert_to_base_unit(12, "Each") is None
        assert convert_to_base_unit(12, "crate") is None

    def test_missing_value_or_unit(self):
        assert convert_to_base_unit(None, "ml") is None
        assert convert_to_base_unit(0, "ml") is None
        assert convert_to_base_unit(750, None) is None

def test_unit_type_and_label():
    assert get_unit_type("fl oz") == UnitKind.VOLUME
    assert get_unit_type("oz") == UnitKind.WEIGHT
    assert get_unit_type("Each") == UnitKind.COUNT
    assert get_unit_type("crate") == UnitKind.UNKNOWN
    assert get_base_unit_label("L") == "ml"
    assert get_base_unit_label("kg") == "g"
    assert get_base_unit_label("Each") == "unit"
    assert get_base_unit_label(None) == ""
