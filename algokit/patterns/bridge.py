"""Bridge: switches and electrical equipment vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ElectricalEquipment(ABC):
    """An appliance that a switch can power on and off."""

    @abstractmethod
    def power_on(self) -> None:
        """Turn the appliance on."""

    @abstractmethod
    def power_off(self) -> None:
        """Turn the appliance off."""


@dataclass
class Light(ElectricalEquipment):
    """An electric light that remembers whether it is lit."""

    is_on: bool = False

    def power_on(self) -> None:
        self.is_on = True
        print("Light is on.")

    def power_off(self) -> None:
        self.is_on = False
        print("Light is off.")


@dataclass
class Fan(ElectricalEquipment):
    """An electric fan that remembers whether it is running."""

    is_on: bool = False

    def power_on(self) -> None:
        self.is_on = True
        print("Fan is on.")

    def power_off(self) -> None:
        self.is_on = False
        print("Fan is off.")


class Switch(ABC):
    """A switch bound to one piece of equipment."""

    def __init__(self, equipment: ElectricalEquipment) -> None:
        self.equipment = equipment

    @abstractmethod
    def on(self) -> None:
        """Turn the equipment on."""

    @abstractmethod
    def off(self) -> None:
        """Turn the equipment off."""


class PullChainSwitch(Switch):
    def on(self) -> None:
        print("Turn on the equipment with a zipper switch.")
        self.equipment.power_on()

    def off(self) -> None:
        print("Turn off the equipment with a zipper switch.")
        self.equipment.power_off()


class TwoPositionSwitch(Switch):
    def on(self) -> None:
        print("Turn on the equipment with a two-position switch.")
        self.equipment.power_on()

    def off(self) -> None:
        print("Turn off the equipment with a two-position switch.")
        self.equipment.power_off()


def demo() -> None:
    """Drive a light with a pull-chain switch and a fan with a two-position switch."""
    pull_chain = PullChainSwitch(Light())
    two_position = TwoPositionSwitch(Fan())
    pull_chain.on()
    pull_chain.off()
    two_position.on()
    two_position.off()