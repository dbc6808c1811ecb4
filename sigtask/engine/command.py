import logging
import os
import subprocess
import time
from typing import TextIO

from sigtask.config.types import EngineConfig

from .types import EngineInvocationError, EngineResult

logger = logging.getLogger(__name__)

NO_EXIT_ENV = "SIGTEST_NO_EXIT"


class CommandEngine:
    def __init__(self, config: EngineConfig):
        self.config = config

    def run(
        self,
        args: list[str],
        out: TextIO | None,
        err: TextIO | None,
        *,
        no_exit: bool,
    ) -> EngineResult:
        command = [*self.config.command, *args]
        env = {**os.environ, **dict(self.config.env)}
        if no_exit:
            env[NO_EXIT_ENV] = "true"

        start = time.monotonic()
        try:
            result = subprocess.run(
                command,
                cwd=self.config.working_dir or None,
                env=env,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise EngineInvocationError(
                f"could not start {command[0]}: {exc}"
            ) from exc
        duration = time.monotonic() - start

        logger.debug(
            "engine exited with code %d after %.3fs", result.returncode, duration
        )

        if out is not None and result.stdout:
            out.write(result.stdout)
        err_sink = err if err is not None else out
        if err_sink is not None and result.stderr:
            err_sink.write(result.stderr)

        report = result.stdout.strip() or f"exit code {result.returncode}"
        return EngineResult(result.returncode in self.config.pass_codes, report)
