"""Singleton: a class with exactly one shared instance."""

from __future__ import annotations

from typing import ClassVar

MESSAGE = "Singleton do something"


class Singleton:
    """Class whose only instance is reached through ``Singleton.instance()``.

    Calling the class directly raises TypeError.
    """

    _instance: ClassVar[Singleton | None] = None

    def __init__(self) -> None:
        raise TypeError("use Singleton.instance() to obtain the instance")

    @classmethod
    def instance(cls) -> Singleton:
        """Return the shared instance, creating it on first use."""
        if Singleton._instance is None:
            Singleton._instance = object.__new__(Singleton)
        return Singleton._instance

    def do_something(self) -> str:
        """Print a message showing the instance at work and return it."""
        message = MESSAGE
        print(message)
        return message


def demo() -> None:
    """Use the shared instance once."""
    Singleton.instance().do_something()