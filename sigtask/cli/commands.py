from __future__ import annotations

import argparse
import sys

from sigtask.config import ConfigurationError, ProjectConfig, load_project
from sigtask.engine import CommandEngine, EngineInvocationError
from sigtask.logging import configure_logging
from sigtask.params import build_base_params, build_params
from sigtask.runner import TaskRunner

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        configure_logging(args.log_level)

        match args.command:
            case "run":
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case "args":
                return cmd_args(args)
            case _:
                return 2

    except (ConfigurationError, KeyError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    targets: list[str] = args.targets or project.tasks_ids()
    tasks = [project.get_task(tid) for tid in targets]

    runner = TaskRunner(_engine_factory(project), out=sys.stdout)

    for task in tasks:
        try:
            outcome = runner.execute(task)
        except EngineInvocationError as exc:
            print(f"FAIL {task.id}")
            print(exc.report, file=sys.stderr)
            return 1

        print(f"{'WARN' if outcome.failed else 'OK'} {task.id}")

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    for tid in project.tasks_ids():
        print(tid)
    return 0


def cmd_args(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    task = project.get_task(args.target)
    for token in build_params(task, build_base_params(task)):
        print(token)
    return 0


def _engine_factory(project: ProjectConfig):
    return lambda: CommandEngine(project.engine)
