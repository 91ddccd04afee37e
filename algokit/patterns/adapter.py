"""Adapter: charge through a socket interface using an incompatible charger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class RussiaSocket(ABC):
    """The socket interface clients expect (round two-pin)."""

    @abstractmethod
    def charge(self) -> None:
        """Charge a device through this socket."""


@dataclass
class OwnCharger:
    """The existing charger with a flat two-pin plug; counts its charges."""

    charges: int = 0

    def charge_with_feet_flat(self) -> str:
        """Charge once, announce it and return the announcement."""
        self.charges += 1
        message = "OwnCharger.charge_with_feet_flat"
        print(message)
        return message


class PowerAdapter(RussiaSocket):
    """Presents an ``OwnCharger`` through the ``RussiaSocket`` interface."""

    def __init__(self) -> None:
        self._charger = OwnCharger()

    def charge(self) -> None:
        self._charger.charge_with_feet_flat()


def demo() -> None:
    """Charge through a power adapter."""
    adapter: RussiaSocket = PowerAdapter()
    adapter.charge()