import json
import logging
import os
import shlex
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    ConfigurationError,
    EngineConfig,
    ProjectConfig,
    ReportFormat,
    TaskOptions,
    UnsupportedConfigFormatError,
)

logger = logging.getLogger(__name__)

TASK_KEYS = {
    "package",
    "classpath",
    "filename",
    "apiVersion",
    "exclude",
    "failonerror",
    "negative",
    "binary",
    "backward",
    "formatHuman",
    "output",
    "debug",
    "errorAll",
}

ENGINE_KEYS = {"command", "pass_codes", "env", "working_dir"}

_TRUE_WORDS = {"true", "yes", "on"}
_FALSE_WORDS = {"false", "no", "off"}


def load_project(path: str | Path) -> ProjectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigurationError(f"Build file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigurationError(f"Build file path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    project = _build_project_config(raw_file, pure_path.parent)
    logger.debug("loaded %d task(s) from %s", len(project), pure_path)
    return project


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigurationError(
            f"{path}: parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_project_config(raw: Mapping[str, Any], base_dir: Path) -> ProjectConfig:
    tasks = {}

    if "tasks" not in raw:
        raise ConfigurationError("Missing 'tasks' field")

    if not isinstance(raw["tasks"], Mapping):
        raise ConfigurationError(f"'tasks' must be a mapping, got {type(raw['tasks'])}")

    if len(raw["tasks"]) < 1:
        raise ConfigurationError("There must be at least one task in the build file")

    for task_id, fields in raw["tasks"].items():
        if not isinstance(task_id, str):
            raise ConfigurationError(f"Task id must be a string, got {type(task_id)}")

        if not isinstance(fields, Mapping):
            raise ConfigurationError(f"{task_id} must be a mapping")

        task_id_norm = task_id.strip()

        if len(task_id_norm) < 1:
            raise ConfigurationError("A task id can't be empty")

        if task_id_norm in tasks:
            raise ConfigurationError(f"Duplicate task id after normalization: {task_id_norm}")

        tasks[task_id_norm] = _build_task_options(task_id_norm, fields)

    engine = _build_engine_config(raw.get("engine", {}), base_dir)

    return ProjectConfig(tasks=tasks, engine=engine)


def _build_task_options(task_id: str, fields: Mapping[str, Any]) -> TaskOptions:
    for key in fields.keys():
        if key not in TASK_KEYS:
            raise ConfigurationError(f"{task_id}: Can't process: {key}")

    packages = _string_list(task_id, "package", fields.get("package"))
    classpath = _string_list(
        task_id, "classpath", fields.get("classpath"), separator=os.pathsep
    )
    exclude = _string_list(task_id, "exclude", fields.get("exclude"))

    backward = _boolean(task_id, "backward", fields.get("backward", False))
    human = _boolean(task_id, "formatHuman", fields.get("formatHuman", False))

    return TaskOptions(
        id=task_id,
        package_names=packages,
        classpath=classpath,
        file_name=_optional_string(task_id, "filename", fields.get("filename")) or "",
        api_version=_optional_string(task_id, "apiVersion", fields.get("apiVersion")),
        exclude=exclude,
        binary=_boolean(task_id, "binary", fields.get("binary", False)),
        report_format=ReportFormat.from_flags(backward, human),
        output=_optional_string(task_id, "output", fields.get("output")),
        debug=_boolean(task_id, "debug", fields.get("debug", False)),
        error_all=_boolean(task_id, "errorAll", fields.get("errorAll", False)),
        negative=_boolean(task_id, "negative", fields.get("negative", False)),
        fail_on_error=_boolean(task_id, "failonerror", fields.get("failonerror", False)),
    )


def _build_engine_config(raw: Any, base_dir: Path) -> EngineConfig:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"'engine' must be a mapping, got {type(raw)}")

    for key in raw.keys():
        if key not in ENGINE_KEYS:
            raise ConfigurationError(f"engine: Can't process: {key}")

    defaults = EngineConfig()
    command = defaults.command
    pass_codes = defaults.pass_codes
    env = {}
    working_dir = None

    if "command" in raw:
        value = raw["command"]
        if isinstance(value, str):
            command = tuple(shlex.split(value))
        elif isinstance(value, list) and all(isinstance(item, str) for item in value):
            command = tuple(value)
        else:
            raise ConfigurationError("engine: command should be a string or a list of strings")

        if len(command) < 1:
            raise ConfigurationError("engine: command can't be empty")

    if "pass_codes" in raw:
        value = raw["pass_codes"]
        if isinstance(value, bool) or not isinstance(value, (int, list)):
            raise ConfigurationError("engine: pass_codes should be an integer or a list")

        codes = [value] if isinstance(value, int) else value
        for code in codes:
            if isinstance(code, bool) or not isinstance(code, int):
                raise ConfigurationError(f"engine: {code!r} is not an exit code")

        if len(codes) < 1:
            raise ConfigurationError("engine: pass_codes can't be empty")

        pass_codes = tuple(codes)

    if "env" in raw:
        if not isinstance(raw["env"], Mapping):
            raise ConfigurationError("engine: env should be a mapping")

        for key, item in raw["env"].items():
            if not isinstance(key, str) or len(key.strip()) < 1:
                raise ConfigurationError(f"engine: env key {key!r} should be a non-empty string")

            if not isinstance(item, str):
                raise ConfigurationError(f"engine: {item} should be a string")

            env[key.strip()] = item

    if "working_dir" in raw:
        working_dir = _optional_string("engine", "working_dir", raw["working_dir"])
        # relative to the build file, not the caller's cwd
        if working_dir is not None:
            working_dir = str(base_dir / Path(working_dir).expanduser())

    return EngineConfig(command, pass_codes, tuple(sorted(env.items())), working_dir)


def _string_list(
    task_id: str, name: str, value: Any, *, separator: str = ","
) -> tuple[str, ...]:
    if value is None:
        return ()

    if isinstance(value, str):
        items = value.split(separator)
    elif isinstance(value, list):
        items = value
    else:
        raise ConfigurationError(f"{task_id}: '{name}' should be a string or a list")

    out = []
    seen = set()
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(f"{task_id}: {item} should be a string in '{name}'")

        entry = item.strip()

        # Empty entries come from trailing separators
        if len(entry) < 1 or entry in seen:
            continue

        out.append(entry)
        seen.add(entry)

    return tuple(out)


def _optional_string(task_id: str, name: str, value: Any) -> str | None:
    if value is None:
        return None

    if not isinstance(value, str):
        raise ConfigurationError(f"{task_id}: '{name}' should be a string")

    stripped = value.strip()
    return stripped or None


def _boolean(task_id: str, name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False

    raise ConfigurationError(f"{task_id}: '{name}' should be a boolean, got {value!r}")
