"""
Configuration parser for the NClist benchmark runner.

Handles TOML file parsing into dataclasses with validated defaults.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from .debug import debug_print


def _debug_print(msg: str) -> None:
    debug_print("CONFIG", msg)


@dataclass
class BenchConfig:
    """Configuration for the synthetic benchmark data set and query sweep."""
    size: int = 10000               # Number of stored ranges
    contained_fraction: float = 0.8 # Share of ranges nested inside an earlier range
    range_width: int = 1000         # Width of a top-level range
    span: int = 1_000_000           # Coordinate space the ranges are placed in
    query_width: int = 1000
    query_step: int = 1000          # Distance between consecutive query starts
    repeat: int = 3                 # Timed repetitions of the query sweep
    seed: int = 42

    def validate(self):
        """Raise ValueError for settings the benchmark cannot run with."""
        for name in ('size', 'range_width', 'span', 'query_width', 'query_step', 'repeat'):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"Bench.{name} must be a positive integer, got {value!r}")
        if not 0.0 <= self.contained_fraction <= 1.0:
            raise ValueError(
                f"Bench.contained_fraction must be between 0 and 1, got {self.contained_fraction!r}"
            )
        if self.range_width > self.span:
            raise ValueError("Bench.range_width must not exceed Bench.span")


@dataclass
class Config:
    """Main configuration container for the benchmark runner."""

    debug: bool = False
    timezone: str = "UTC"  # Local timezone for naive datetime coordinates
    bench: BenchConfig = field(default_factory=BenchConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'nclist' / 'nclist.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        Without an explicit path a missing default file yields the default
        configuration; an explicit path must exist.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                _debug_print(f"No configuration at {config_path}, using defaults")
                return cls()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
        _debug_print(f"TOML data keys: {list(data.keys())}")

        # Parse General section
        general = data.get('General', {})

        # Parse Bench section
        bench_data = data.get('Bench', {})
        bench = BenchConfig(
            size=bench_data.get('size', BenchConfig.size),
            contained_fraction=float(bench_data.get('contained_fraction', BenchConfig.contained_fraction)),
            range_width=bench_data.get('range_width', BenchConfig.range_width),
            span=bench_data.get('span', BenchConfig.span),
            query_width=bench_data.get('query_width', BenchConfig.query_width),
            query_step=bench_data.get('query_step', BenchConfig.query_step),
            repeat=bench_data.get('repeat', BenchConfig.repeat),
            seed=bench_data.get('seed', BenchConfig.seed),
        )
        bench.validate()

        return cls(
            debug=bool(general.get('debug', False)),
            timezone=general.get('timezone', 'UTC'),
            bench=bench,
        )
