from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from .config import settings
from .domain import Domain
from .models import Verdict


class OutputHandler(ABC):
    @abstractmethod
    def emit_verdict(self, domain: Domain, verdict: Verdict) -> None:
        """Emit one verdict; ``domain`` is passed for handlers that report it."""


class StreamHandler(OutputHandler):
    """Writes one verdict token per line and nothing else."""

    def __init__(
        self,
        sink: TextIO,
        forbidden_token: str | None = None,
        allowed_token: str | None = None,
    ) -> None:
        self.sink = sink
        self.tokens = {
            Verdict.FORBIDDEN: settings.forbidden_token if forbidden_token is None else forbidden_token,
            Verdict.ALLOWED: settings.allowed_token if allowed_token is None else allowed_token,
        }

    def emit_verdict(self, domain: Domain, verdict: Verdict) -> None:
        print(self.tokens[verdict], file=self.sink)
