from dataclasses import dataclass

from sigtask.engine.types import EngineResult


@dataclass(frozen=True)
class TaskOutcome:
    task_id: str
    result: EngineResult
    failed: bool
    args: list[str]
