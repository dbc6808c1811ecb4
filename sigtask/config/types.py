from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ReportFormat(Enum):
    PLAIN = auto()
    BACKWARD = auto()
    HUMAN = auto()

    @classmethod
    def from_flags(cls, backward: bool, human: bool) -> ReportFormat:
        # backward always wins, human is dropped silently
        if backward:
            return cls.BACKWARD
        if human:
            return cls.HUMAN
        return cls.PLAIN


@dataclass(frozen=True)
class TaskOptions:
    id: str
    package_names: tuple[str, ...] = ()
    classpath: tuple[str, ...] = ()
    file_name: str = ""
    api_version: str | None = None
    exclude: tuple[str, ...] = ()
    binary: bool = False
    report_format: ReportFormat = ReportFormat.PLAIN
    output: str | None = None
    debug: bool = False
    error_all: bool = False
    negative: bool = False
    fail_on_error: bool = False

    @property
    def backward_compatible(self) -> bool:
        return self.report_format is ReportFormat.BACKWARD

    @property
    def human_readable(self) -> bool:
        return self.report_format is ReportFormat.HUMAN


DEFAULT_ENGINE_COMMAND = ("java", "-jar", "sigtestdev.jar", "Test")
DEFAULT_PASS_CODES = (95,)


@dataclass(frozen=True)
class EngineConfig:
    command: tuple[str, ...] = DEFAULT_ENGINE_COMMAND
    pass_codes: tuple[int, ...] = DEFAULT_PASS_CODES
    env: tuple[tuple[str, str], ...] = ()
    working_dir: str | None = None


@dataclass
class ProjectConfig:
    tasks: dict[str, TaskOptions]
    engine: EngineConfig = field(default_factory=EngineConfig)

    def __iter__(self):
        for task_id in sorted(self.tasks):
            yield self.tasks[task_id]

    def __len__(self):
        return len(self.tasks)

    def has_task(self, id: str) -> bool:
        return id in self.tasks

    def get_task(self, id: str) -> TaskOptions:
        if not self.has_task(id):
            raise KeyError(id)

        return self.tasks[id]

    def tasks_ids(self) -> list[str]:
        return sorted(self.tasks.keys())


class ConfigurationError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigurationError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
