from .loader import load_project
from .types import (
    ConfigurationError,
    EngineConfig,
    ProjectConfig,
    ReportFormat,
    TaskOptions,
    UnsupportedConfigFormatError,
)

__all__ = [
    "load_project",
    "ProjectConfig",
    "EngineConfig",
    "TaskOptions",
    "ReportFormat",
    "ConfigurationError",
    "UnsupportedConfigFormatError",
]
