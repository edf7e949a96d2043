"""ContextVar-based configuration for gentree.

Provides context-local configuration using Python's ContextVars (PEP 567).
The reference parser, the patch assembler and the edit session read the
active config when no explicit one is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from gentree.config import ReconcileConfig, config_context

    with config_context(ReconcileConfig(placeholder_kind="block")):
        patches = reconcile(factory, previous, current)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Immutable reconciliation and document-shape configuration.

    Attributes:
        root_kind: Kind tag of document roots built by the reference parser
        placeholder_kind: Kind of the empty container that keeps a document
            non-empty when all of its content is deleted
        heading_kind: Kind of heading blocks in the reference grammar
        paragraph_kind: Kind of paragraph blocks in the reference grammar
        heading_marker: Line prefix that turns a line into a heading
        check_adjacency: Reject reconciliation of non-consecutive generations
        history_limit: Maximum number of roots an EditSession retains
            (None keeps every generation)

    Raises:
        ValueError: ``history_limit`` is less than 1.

    """

    root_kind: str = "doc"
    placeholder_kind: str = "paragraph"
    heading_kind: str = "heading"
    paragraph_kind: str = "paragraph"
    heading_marker: str = "= "
    check_adjacency: bool = True
    history_limit: int | None = None

    def __post_init__(self) -> None:
        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError(f"history_limit must be at least 1, got {self.history_limit}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ReconcileConfig":
        """Create ReconcileConfig from dictionary.

        Only includes keys that are valid ReconcileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ReconcileConfig.from_dict({
            ...     "placeholder_kind": "block",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.placeholder_kind
            'block'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReconcileConfig = ReconcileConfig()

_config: ContextVar[ReconcileConfig] = ContextVar(
    "reconcile_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> ReconcileConfig:
    """Get current configuration (context-local)."""
    return _config.get()


def set_config(config: ReconcileConfig) -> None:
    """Set configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: ReconcileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(ReconcileConfig(check_adjacency=False)):
        ...     get_config().check_adjacency
        False

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "ReconcileConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
