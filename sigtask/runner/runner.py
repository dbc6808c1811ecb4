import logging
import sys
from typing import TextIO

from sigtask.config.types import ConfigurationError, TaskOptions
from sigtask.engine.types import EngineFactory, EngineInvocationError
from sigtask.params import build_base_params, build_params

from .types import TaskOutcome

logger = logging.getLogger(__name__)


def should_signal_failure(negative: bool, passed: bool) -> bool:
    return negative == passed


def check_options(options: TaskOptions) -> None:
    if not options.classpath:
        raise ConfigurationError("classpath not specified")

    if not options.package_names:
        raise ConfigurationError("package not specified")

    if not options.file_name:
        raise ConfigurationError("filename not specified")


class TaskRunner:
    def __init__(
        self,
        engine_factory: EngineFactory,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.engine_factory = engine_factory
        self.out = out
        self.err = err

    def execute(
        self, options: TaskOptions, base_params: list[str] | None = None
    ) -> TaskOutcome:
        check_options(options)

        if base_params is None:
            base_params = build_base_params(options)
        args = build_params(options, base_params)

        logger.info("running signature test %s", options.id)
        logger.debug("arguments: %s", args)

        engine = self.engine_factory()
        out = self.out if self.out is not None else sys.stdout
        result = engine.run(args, out, self.err, no_exit=True)

        failed = should_signal_failure(options.negative, result.passed)
        if failed:
            if options.fail_on_error:
                raise EngineInvocationError(result.report)
            logger.error("%s", result.report)

        return TaskOutcome(options.id, result, failed, args)
