"""Strategy registry -- name -> factory table for build strategies.

The build host looks strategies up by name and shows their display
names. Built-in strategies are installed by ``default_registry()``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from authorgate.exceptions import StrategyNotFoundError
from authorgate.strategy import ignore_committer
from authorgate.strategy.protocols import BuildStrategy

StrategyFactory = Callable[..., BuildStrategy]

# Built-in strategy names that cannot be overridden
_BUILTIN_STRATEGIES = frozenset({ignore_committer.NAME})


@dataclass(frozen=True)
class StrategyEntry:
    """A registered strategy: how to build it and what to call it."""

    name: str
    factory: StrategyFactory
    display_name: str


class StrategyRegistry:
    """Registry of build strategies, keyed by name."""

    def __init__(self) -> None:
        self._entries: dict[str, StrategyEntry] = {}

    def register(
        self,
        name: str,
        factory: StrategyFactory,
        display_name: str | None = None,
    ) -> StrategyEntry:
        """Register a strategy factory.

        The factory is called as ``factory(config, **kwargs)`` by
        ``create()``.

        Raises ValueError if name conflicts with a built-in strategy or is
        already registered.
        """
        if name in _BUILTIN_STRATEGIES:
            raise ValueError(
                f"Cannot register '{name}': conflicts with built-in strategy."
            )
        if name in self._entries:
            raise ValueError(
                f"Strategy '{name}' is already registered. "
                f"Unregister it first to re-register."
            )
        entry = StrategyEntry(name=name, factory=factory, display_name=display_name or name)
        self._entries[name] = entry
        return entry

    def unregister(self, name: str) -> None:
        """Remove a strategy by name. Unknown names are ignored.

        Raises ValueError for built-in strategies.
        """
        if name in _BUILTIN_STRATEGIES:
            raise ValueError(f"Cannot unregister built-in strategy '{name}'.")
        self._entries.pop(name, None)

    def get(self, name: str) -> StrategyEntry:
        """Look up a registered strategy.

        Raises:
            StrategyNotFoundError: If no strategy has that name.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise StrategyNotFoundError(name) from None

    def create(self, name: str, config: Any = None, **kwargs: Any) -> BuildStrategy:
        """Instantiate a registered strategy with its configuration."""
        return self.get(name).factory(config, **kwargs)

    def display_name(self, name: str) -> str:
        return self.get(name).display_name

    def is_registered(self, name: str) -> bool:
        return name in self._entries

    @property
    def names(self) -> list[str]:
        """All registered strategy names, sorted."""
        return sorted(self._entries)

    def entries(self) -> list[StrategyEntry]:
        return [self._entries[n] for n in self.names]

    def _install_builtins(self) -> None:
        self._entries[ignore_committer.NAME] = StrategyEntry(
            name=ignore_committer.NAME,
            factory=ignore_committer.IgnoreCommitterStrategy.from_config,
            display_name=ignore_committer.DISPLAY_NAME,
        )


def default_registry() -> StrategyRegistry:
    """Return a new registry with the built-in strategies installed."""
    registry = StrategyRegistry()
    registry._install_builtins()
    return registry
