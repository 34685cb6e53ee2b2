from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


def _now_iso() -> str:
    # ISO-ish without importing datetime (fast + good enough for logs)
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


@dataclass
class TelemetryLogger:
    """Append-only JSONL event log for generation traces."""
    path: Optional[Path] = None
    enabled: bool = True
    flush_each_write: bool = False
    sample_every_n_generations: int = 1  # per-step events for 1 generation in N
    _generation_counter: int = 0
    _started_at: float = field(default_factory=time.time)

    def init(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Touch file (don't overwrite)
        self.path.touch(exist_ok=True)
        self.log("telemetry_init", file=str(self.path))

    @property
    def active(self) -> bool:
        return self.enabled and self.path is not None

    def log(self, event: str, **fields: Any) -> None:
        if not self.active:
            return

        row: Dict[str, Any] = {
            "t": time.time(),
            "ts": _now_iso(),
            "event": event,
            **fields,
        }

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
                if self.flush_each_write:
                    f.flush()
        except (OSError, TypeError, ValueError):
            # Telemetry must never break generation.
            return

    def tick_generation(self) -> int:
        self._generation_counter += 1
        return self._generation_counter

    def should_trace_generation(self) -> bool:
        if self.sample_every_n_generations <= 0:
            return False
        return self._generation_counter % self.sample_every_n_generations == 0

    def uptime(self) -> float:
        return time.time() - self._started_at


# global singleton (easy import everywhere)
telemetry = TelemetryLogger()
