from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleEngineConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    selector: str | None = None  # default rule selector for API output
