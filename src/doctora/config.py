"""Parse limits held in a context variable.

``parse()`` takes only tokens. Limits that callers may want to tune live in
a ParseConfig stored in a ContextVar (PEP 567), which the parser reads once
when it is constructed.

Thread Safety:
    Each thread (and each asyncio task) sees its own value, so setting a
    config in one never affects parses running in another.

Usage:
    from doctora import parse_text
    from doctora.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_nesting_depth=16)):
        result = parse_text(source)

"""

import dataclasses
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_NESTING_DEPTH = 64

# Each open span costs a few interpreter frames while parsing and rendering
MAX_NESTING_DEPTH_CEILING = 128


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Tunable parser limits.

    The source file path is not part of the config; it belongs to a single
    tokenize call.

    Attributes:
        max_nesting_depth: How many bold/italic spans may be open at once.
            A paragraph or title that goes deeper is reported as
            InvalidStructure and kept as plain words. Must be between 1
            and MAX_NESTING_DEPTH_CEILING.
    """

    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 1:
            raise ValueError(
                f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}"
            )
        if self.max_nesting_depth > MAX_NESTING_DEPTH_CEILING:
            raise ValueError(
                f"max_nesting_depth must be at most {MAX_NESTING_DEPTH_CEILING}, "
                f"got {self.max_nesting_depth}"
            )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "ParseConfig":
        """Build a config from a mapping, e.g. a loaded settings file.

        Keys that are not ParseConfig fields are skipped.

        Example:
            >>> ParseConfig.from_dict({"max_nesting_depth": 8, "theme": "dark"})
            ParseConfig(max_nesting_depth=8)
        """
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})


_DEFAULT_CONFIG = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "doctora_parse_config", default=_DEFAULT_CONFIG
)


def get_parse_config() -> ParseConfig:
    """The config active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Replace the config for the current context until reset."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Go back to the defaults in the current context."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Use ``config`` inside the ``with`` block only.

    The previous config is restored on exit, including when the block raises.

    Example:
        >>> with parse_config_context(ParseConfig(max_nesting_depth=4)) as cfg:
        ...     cfg.max_nesting_depth
        4
    """
    token = _parse_config.set(config)
    try:
        yield config
    finally:
        _parse_config.reset(token)


__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "MAX_NESTING_DEPTH_CEILING",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
