"""Stdout logging adapter."""

from datetime import datetime

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


class StdoutAdapter:
    """Adapter for stdout logging."""

    def __init__(self, level: str = "info"):
        self.threshold = LEVELS.get(level.lower(), LEVELS["info"])

    def log(self, level: str, message: str) -> None:
        """Write log entry to stdout."""
        if LEVELS.get(level.lower(), LEVELS["error"]) < self.threshold:
            return

        timestamp = datetime.now().isoformat()
        print(f"[{timestamp}] {level.upper()}: {message}", flush=True)
