from .config import ConfigurationError, TaskOptions, load_project
from .engine import CommandEngine, EngineInvocationError, EngineResult
from .runner import TaskOutcome, TaskRunner

__all__ = [
    "CommandEngine",
    "ConfigurationError",
    "EngineInvocationError",
    "EngineResult",
    "TaskOptions",
    "TaskOutcome",
    "TaskRunner",
    "load_project",
]
