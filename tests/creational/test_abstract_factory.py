import pytest

from pattern_catalog.creational.abstract_factory import (
    ArtFurniture,
    FurnitureFactory,
    ModernFurniture,
    VictorianFurniture,
    create_furniture_registry,
    get_furniture_factory,
    furnish_room,
    main,
)
from pattern_catalog.infrastructure.exceptions import UnsupportedTypeError
from pattern_catalog.infrastructure.registry.factory_registry import FactoryRegistry


def test_main_prints_each_family_under_its_own_heading(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "****Victorian Furniture****",
        "Sitting on Victorian Chair",
        "Lieing on Victorian Sofa",
        "Keeping cups on Victorian Coffee table",
        "",
        "****Art Deco Furniture****",
        "Sitting on Art Chair",
        "Lieing on Art Sofa",
        "Keeping cups on Art Coffee table",
        "",
        "****Modern Furniture****",
        "Sitting on Modern Chair",
        "Lieing on Modern Sofa",
        "Keeping cups on Modern Coffee table",
        "",
    ]


@pytest.mark.parametrize(
    "style, family",
    [("Victorian", VictorianFurniture), ("ArtDeco", ArtFurniture), ("Modern", ModernFurniture)],
)
def test_registry_returns_a_fresh_family_per_call(style, family):
    registry = create_furniture_registry()

    first = registry.create(style)
    second = registry.create(style)

    assert isinstance(first, family)
    assert first is not second


def test_products_come_from_a_single_family(capsys):
    factory = create_furniture_registry().create("Modern")

    furnish_room(factory)

    assert all("Modern" in line for line in capsys.readouterr().out.splitlines())


def test_unknown_style_raises_unsupported_type():
    registry = create_furniture_registry()

    with pytest.raises(UnsupportedTypeError) as exc_info:
        registry.create("Gothic")

    assert exc_info.value.type_name == "Gothic"
    assert exc_info.value.available == ["Victorian", "ArtDeco", "Modern"]


def test_main_accepts_an_injected_registry(capsys):
    registry: FactoryRegistry[FurnitureFactory] = FactoryRegistry("furniture")
    registry.register("Victorian", ModernFurniture)
    registry.register("ArtDeco", ModernFurniture)
    registry.register("Modern", ModernFurniture)

    main(registry)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "****Victorian Furniture****"
    assert lines[1] == "Sitting on Modern Chair"


def test_get_furniture_factory_uses_default_registry():
    assert isinstance(get_furniture_factory("ArtDeco"), ArtFurniture)

    with pytest.raises(UnsupportedTypeError):
        get_furniture_factory("Baroque")
