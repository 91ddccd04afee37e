"""Run every design-pattern demonstration in turn."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from algokit.patterns import abstract_factory, adapter, bridge, observer, singleton

RULE = "*******************"

_DEMOS: tuple[tuple[str, Callable[[], None]], ...] = (
    ("Singleton mode", singleton.demo),
    ("Abstract factory pattern", abstract_factory.demo),
    ("Adapter mode", adapter.demo),
    ("Bridge mode", bridge.demo),
    ("Observer mode", observer.demo),
)


def _banner(title: str) -> None:
    print(RULE)
    print(f"** {title} **")
    print(RULE)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a heading and run each pattern's demo under its own banner."""
    _banner("Design pattern example")
    for title, run in _DEMOS:
        _banner(title)
        run()
    return 0