"""Observer: a subject notifies its observers of price changes."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_PRICE = 10.0


class Observer(ABC):
    """Receives price updates."""

    @abstractmethod
    def update(self, price: float) -> None:
        """React to a new price."""


class Subject(ABC):
    """Keeps observers and notifies them."""

    @abstractmethod
    def attach(self, observer: Observer) -> None:
        """Start notifying ``observer``."""

    @abstractmethod
    def detach(self, observer: Observer) -> None:
        """Stop notifying ``observer``."""

    @abstractmethod
    def notify(self) -> None:
        """Notify every attached observer."""


class ConcreteObserver(Observer):
    """Observer that prints its name and the price it receives."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, price: float) -> None:
        print(f"{self.name} - price{price:g}")


class ConcreteSubject(Subject):
    """Subject holding a price, notified to observers in attach order."""

    def __init__(self) -> None:
        self._price = DEFAULT_PRICE
        self._observers: list[Observer] = []

    @property
    def price(self) -> float:
        return self._price

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def set_price(self, price: float) -> None:
        """Change the price; observers learn of it on the next ``notify``."""
        self._price = price

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of ``observer``."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self._price)


def demo() -> None:
    """Notify two observers, detach one, then notify again."""
    subject = ConcreteSubject()
    first = ConcreteObserver("Jack Ma")
    second = ConcreteObserver("Pony")
    subject.attach(first)
    subject.attach(second)
    subject.set_price(12.5)
    subject.notify()
    subject.detach(second)
    subject.set_price(15.0)
    subject.notify()