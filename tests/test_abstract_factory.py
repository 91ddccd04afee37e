import pytest

from algokit.patterns.abstract_factory import (
    AudiFactory,
    BenzFactory,
    BmwFactory,
    Car,
    Factory,
    FactoryType,
    create_factory,
    demo,
)


@pytest.mark.parametrize(
    "kind, factory_class, car, bike",
    [
        (FactoryType.BENZ, BenzFactory, "Benz Car", "Benz Bike"),
        (FactoryType.BMW, BmwFactory, "Bmw Car", "Bmw Bike"),
        (FactoryType.AUDI, AudiFactory, "Audi Car", "Audi Bike"),
    ],
)
def test_factories_build_matching_products(kind, factory_class, car, bike):
    factory = create_factory(kind)
    assert type(factory) is factory_class
    assert factory.create_car().name() == car
    assert factory.create_bike().name() == bike


def test_create_factory_accepts_enum_value():
    assert create_factory(FactoryType.BMW.value).create_car().name() == "Bmw Car"


def test_unknown_factory_type_raises():
    with pytest.raises(ValueError):
        create_factory(99)


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Factory()
    with pytest.raises(TypeError):
        Car()


def test_demo_output(capsys):
    demo()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Benz factory - Car: Benz Car"
    assert lines[3] == "Bmw factory - Bike: Bmw Bike"
    assert lines[-1] == "Audi factory - Bike: Audi Bike"
    assert len(lines) == 6