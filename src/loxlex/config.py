"""ContextVar-based scan configuration for loxlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Read by the top-level ``scan()`` helper; the Scanner class itself takes
its reporter explicitly and never consults the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from loxlex import scan
    from loxlex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(raise_on_error=True)):
        tokens = scan(source)  # raises ScanFailedError on lexical errors

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from loxlex.reporting import ErrorReporter


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is per-call state, not configuration. It is passed
    to ``scan()`` directly.

    Attributes:
        reporter: Error sink used when scan() is not given one explicitly
        raise_on_error: Raise ScanFailedError after a scan that reported errors

    """

    reporter: ErrorReporter | None = None
    raise_on_error: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "raise_on_error": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.raise_on_error
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
