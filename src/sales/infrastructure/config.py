"""Runtime settings read from environment variables.

Every field has a default, so the CLI runs with an empty environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_LOG_LEVEL = "SALES_LOG_LEVEL"
ENV_LOG_FILE = "SALES_LOG_FILE"
ENV_CURRENCY = "SALES_CURRENCY"


@dataclass(frozen=True)
class Settings:

    log_level: str = "WARNING"
    log_file: str | None = None
    currency: str = "USD"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` when omitted)."""
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(ENV_LOG_LEVEL, cls.log_level),
            log_file=env.get(ENV_LOG_FILE) or None,
            currency=env.get(ENV_CURRENCY, cls.currency),
        )
