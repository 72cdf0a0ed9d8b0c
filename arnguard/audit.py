"""Structured audit logging of match decisions."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from .config import LoggingSettings
from .types import MatchDecision


class AuditLogger:
    """Writes audit events as JSON lines."""

    def __init__(self, settings: LoggingSettings, config_version: int) -> None:
        self.logger = logging.getLogger("arnguard.audit")
        if not self.logger.handlers:
            handler: logging.Handler
            if settings.output == "file":
                handler = RotatingFileHandler(
                    settings.file_path,
                    maxBytes=settings.rotate_bytes,
                    backupCount=3,
                )
            else:
                handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
        self.logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))
        self.config_version = config_version

    def log(self, *, action: str, decision: MatchDecision) -> None:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "decision": "allow" if decision.allowed else "deny",
            **decision.to_dict(),
            "config_version": self.config_version,
        }
        self.logger.info(json.dumps(payload))
