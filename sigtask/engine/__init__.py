from .command import CommandEngine
from .types import Engine, EngineFactory, EngineInvocationError, EngineResult

__all__ = [
    "CommandEngine",
    "Engine",
    "EngineFactory",
    "EngineInvocationError",
    "EngineResult",
]
