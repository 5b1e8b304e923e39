"""Run configuration.

RunConfig holds everything needed to start a measurement run. Values come
from explicit arguments or from environment variables:

    LP_URL: Target URL
    LP_ITERATIONS: Number of requests (default 10)
    LP_METHOD: HTTP method (default GET)
    LP_TIMEOUT_S: Per-request timeout in seconds (default 10)
    LP_DELAY_S: Pause between requests in seconds (default 0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

_ENV_KEYS = {
    "url": ("LP_URL", str),
    "iterations": ("LP_ITERATIONS", int),
    "method": ("LP_METHOD", str),
    "timeout_s": ("LP_TIMEOUT_S", float),
    "delay_s": ("LP_DELAY_S", float),
}


@dataclass(frozen=True)
class RunConfig:
    """Settings for one measurement run."""
    url: str
    iterations: int = 10
    method: str = "GET"
    timeout_s: float = 10.0
    delay_s: float = 0.0
    field: str = "time"

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url must not be empty.")
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")
        if self.delay_s < 0:
            raise ValueError(f"delay_s must be non-negative, got {self.delay_s}")
        if not self.field:
            raise ValueError("field must not be empty.")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides: Any) -> RunConfig:
        """Build a config from LP_* variables, with ``overrides`` taking precedence.

        Overrides set to None are ignored so argparse results can be passed
        straight through.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name, (var, convert) in _ENV_KEYS.items():
            raw = environ.get(var, "")
            if raw:
                try:
                    values[name] = convert(raw)
                except ValueError as e:
                    raise ValueError(f"Invalid value for {var}: {raw!r}") from e

        known = {f.name for f in fields(cls)}
        for name, value in overrides.items():
            if name not in known:
                raise TypeError(f"Unknown config option: {name}")
            if value is not None:
                values[name] = value

        if "url" not in values:
            raise ValueError("No URL given; pass one or set LP_URL.")
        return cls(**values)
