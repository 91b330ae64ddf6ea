import pytest

from pattern_catalog.creational.combo_meals import (
    NonVegBurger,
    NonVegCombo,
    NormalFries,
    VegBurger,
    VegCombo,
    create_combo_registry,
    main,
)
from pattern_catalog.infrastructure.exceptions import UnsupportedTypeError


def test_main_serves_veg_then_non_veg(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Preparing veg burger",
        "Preparing fries",
        "Preparing non veg burger",
        "Preparing fries",
    ]


def test_combo_families_create_matching_products():
    assert isinstance(VegCombo().order_burger(), VegBurger)
    assert isinstance(NonVegCombo().order_burger(), NonVegBurger)
    assert isinstance(VegCombo().order_fries(), NormalFries)
    assert isinstance(NonVegCombo().order_fries(), NormalFries)


def test_registry_keys():
    registry = create_combo_registry()

    assert registry.get_registered_types() == ["Veg", "NonVeg"]
    with pytest.raises(UnsupportedTypeError):
        registry.create("Vegan")
