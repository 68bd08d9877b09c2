"""
Strategy Factory Module - Name-based lookup of search strategies.

Strategies register themselves at import time with @register_strategy;
the CLI lists them with get_strategy_info() and falls back to
get_default_strategy_name() when neither the command line nor the
settings file picks one.
"""

from typing import Dict, List, Type

from .base import SearchStrategy


_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}

# Exact under run-length limits; everything else is a baseline
DEFAULT_STRATEGY = "astar"


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """Class decorator adding cls to the registry under cls.name."""
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SearchStrategy:
    """
    Instantiate the strategy registered as name.

    Raises:
        ValueError: If no strategy has that name
    """
    strategy_cls = _STRATEGIES.get(name)
    if strategy_cls is None:
        raise ValueError(
            f"Unknown strategy: {name}. Available: {', '.join(_STRATEGIES)}"
        )
    return strategy_cls()


def get_strategy_names() -> List[str]:
    """Registered names, in registration order."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe every registered strategy.

    Returns:
        One {'name', 'description'} dict per strategy, default first
    """
    ordered = sorted(_STRATEGIES.values(), key=lambda cls: cls.name != DEFAULT_STRATEGY)
    return [{"name": cls.name, "description": cls.description} for cls in ordered]


def get_default_strategy_name() -> str:
    """DEFAULT_STRATEGY when registered, otherwise the first registration."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
