"""
Configuration management for iterable-fns operations.
"""

from enum import Enum
from typing import Any, Optional
from dataclasses import dataclass, fields


class SortStrategy(Enum):
    """How the sort family orders elements."""
    COMPARATOR = "comparator"  # pairwise comparator that never reports equality
    STABLE = "stable"          # key sort, equal keys keep their source order


class IndexMode(Enum):
    """How element callbacks receive the running index."""
    AUTO = "auto"
    ALWAYS = "always"


@dataclass
class IterableFnsConfig:
    """Global configuration for iterable-fns operations."""

    # Sorting
    sort_strategy: SortStrategy = SortStrategy.COMPARATOR

    # Callbacks
    index_mode: IndexMode = IndexMode.AUTO

    _instance: Optional['IterableFnsConfig'] = None

    def __post_init__(self):
        """Coerce string values into their enums."""
        self.sort_strategy = SortStrategy(self.sort_strategy)
        self.index_mode = IndexMode(self.index_mode)

    @classmethod
    def get_instance(cls) -> 'IterableFnsConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs: Any) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        instance.__post_init__()

    @classmethod
    def reset(cls) -> None:
        """Restore every field of the singleton to its declared default."""
        instance = cls.get_instance()
        for f in fields(cls):
            if not f.name.startswith('_'):
                setattr(instance, f.name, f.default)


# Global configuration instance
config = IterableFnsConfig.get_instance()
