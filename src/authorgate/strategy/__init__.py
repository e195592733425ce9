"""Build strategies: the protocol, built-in strategies and their registry."""

from authorgate.strategy.ignore_committer import IgnoreCommitterStrategy
from authorgate.strategy.listeners import DecisionRecorder, log_decision
from authorgate.strategy.protocols import BuildStrategy, DecisionListener
from authorgate.strategy.registry import StrategyEntry, StrategyRegistry, default_registry

__all__ = [
    "BuildStrategy",
    "DecisionListener",
    "DecisionRecorder",
    "IgnoreCommitterStrategy",
    "StrategyEntry",
    "StrategyRegistry",
    "default_registry",
    "log_decision",
]
