"""Abstract factory: one factory per brand builds a matching car and bike."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Car(ABC):
    """A car product."""

    @abstractmethod
    def name(self) -> str:
        """The product's display name."""


class Bike(ABC):
    """A bicycle product."""

    @abstractmethod
    def name(self) -> str:
        """The product's display name."""


class BenzCar(Car):
    def name(self) -> str:
        return "Benz Car"


class BmwCar(Car):
    def name(self) -> str:
        return "Bmw Car"


class AudiCar(Car):
    def name(self) -> str:
        return "Audi Car"


class BenzBike(Bike):
    def name(self) -> str:
        return "Benz Bike"


class BmwBike(Bike):
    def name(self) -> str:
        return "Bmw Bike"


class AudiBike(Bike):
    def name(self) -> str:
        return "Audi Bike"


class FactoryType(Enum):
    """The brands a factory can be created for."""

    BENZ = 0
    BMW = 1
    AUDI = 2


class Factory(ABC):
    """Builds a family of products of one brand."""

    @abstractmethod
    def create_car(self) -> Car:
        """Produce a car."""

    @abstractmethod
    def create_bike(self) -> Bike:
        """Produce a bicycle."""


class BenzFactory(Factory):
    def create_car(self) -> Car:
        return BenzCar()

    def create_bike(self) -> Bike:
        return BenzBike()


class BmwFactory(Factory):
    def create_car(self) -> Car:
        return BmwCar()

    def create_bike(self) -> Bike:
        return BmwBike()


class AudiFactory(Factory):
    def create_car(self) -> Car:
        return AudiCar()

    def create_bike(self) -> Bike:
        return AudiBike()


_FACTORIES: dict[FactoryType, type[Factory]] = {
    FactoryType.BENZ: BenzFactory,
    FactoryType.BMW: BmwFactory,
    FactoryType.AUDI: AudiFactory,
}


def create_factory(factory_type: FactoryType | int) -> Factory:
    """Create the factory for ``factory_type``; raise ValueError if unknown."""
    try:
        kind = FactoryType(factory_type)
    except ValueError:
        raise ValueError(f"unknown factory type: {factory_type!r}") from None
    return _FACTORIES[kind]()


def demo() -> None:
    """Build a car and a bike from every factory and print their names."""
    for kind, label in (
        (FactoryType.BENZ, "Benz"),
        (FactoryType.BMW, "Bmw"),
        (FactoryType.AUDI, "Audi"),
    ):
        factory = create_factory(kind)
        print(f"{label} factory - Car: {factory.create_car().name()}")
        print(f"{label} factory - Bike: {factory.create_bike().name()}")