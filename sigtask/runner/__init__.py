from .runner import TaskRunner, check_options, should_signal_failure
from .types import TaskOutcome

__all__ = ["TaskRunner", "TaskOutcome", "check_options", "should_signal_failure"]
