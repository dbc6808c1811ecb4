from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sigtask")

    parser.add_argument(
        "--config",
        default="sigtask.yml",
        help="Path to build file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging threshold",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run signature tests")
    run.add_argument(
        "targets",
        nargs="*",
        help="Task ids, in the order to run them",
    )

    # list
    subparsers.add_parser("list", help="List tasks")

    # args
    args = subparsers.add_parser("args", help="Show the engine arguments of a task")
    args.add_argument("target", help="Task id")

    return parser
