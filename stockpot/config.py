"""Runtime settings for stockpot.

The only knob is the restock threshold. It is resolved from, in order:
an explicit value (the --threshold CLI option), the
STOCKPOT_RESTOCK_THRESHOLD environment variable, then the built-in default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from stockpot.inventory import DEFAULT_RESTOCK_THRESHOLD, Inventory

THRESHOLD_ENV_VAR = "STOCKPOT_RESTOCK_THRESHOLD"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one stockpot session."""

    restock_threshold: int = DEFAULT_RESTOCK_THRESHOLD
    source: str = "default"

    @classmethod
    def resolve(
        cls,
        threshold: Optional[int] = None,
        env: Optional[dict[str, str]] = None,
    ) -> Settings:
        """Build Settings from an explicit value, the environment, or defaults.

        Args:
            threshold: Explicit restock threshold, wins over everything else.
            env: Environment mapping. Defaults to os.environ.

        Raises:
            ValueError: The chosen value is negative or not an integer.
        """
        if threshold is not None:
            return cls(restock_threshold=_parse_threshold(threshold), source="option")

        env = os.environ if env is None else env
        raw = env.get(THRESHOLD_ENV_VAR, "").strip()
        if raw:
            return cls(restock_threshold=_parse_threshold(raw), source=THRESHOLD_ENV_VAR)
        return cls()

    def new_inventory(self) -> Inventory:
        return Inventory(restock_threshold=self.restock_threshold)


def _parse_threshold(value: object) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"restock threshold must be an integer, got {value!r}") from None
    if n < 0:
        raise ValueError(f"restock threshold must not be negative, got {n}")
    return n
