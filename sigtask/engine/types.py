from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, TextIO


@dataclass(frozen=True)
class EngineResult:
    passed: bool
    report: str


class Engine(Protocol):
    def run(
        self,
        args: list[str],
        out: TextIO | None,
        err: TextIO | None,
        *,
        no_exit: bool,
    ) -> EngineResult: ...


EngineFactory = Callable[[], Engine]


class EngineInvocationError(Exception):
    def __init__(self, report: str) -> None:
        super().__init__(report)
        self.report = report
