"""
Strategy Registry - Strategies add themselves by name when their module is imported.

The CLI builds its --strategy choices from strategy_descriptions() and
resolves the configured name through create_strategy().
"""

from typing import Dict, Optional, Type

from .base import SolverStrategy


_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

# Used when neither the command line nor config.json names a strategy
DEFAULT_STRATEGY = "bfs"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """Class decorator adding a strategy under its ``name``."""
    _STRATEGIES[cls.name] = cls
    return cls


def strategy_descriptions() -> Dict[str, str]:
    """Registered strategy names mapped to their one-line descriptions."""
    return {name: cls.description for name, cls in _STRATEGIES.items()}


def create_strategy(name: Optional[str] = None) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name, or None for DEFAULT_STRATEGY

    Raises:
        ValueError: If no strategy is registered under that name
    """
    name = name or DEFAULT_STRATEGY
    if name not in _STRATEGIES:
        raise ValueError(f"Unknown strategy: {name}. Available: {', '.join(_STRATEGIES)}")
    return _STRATEGIES[name]()
