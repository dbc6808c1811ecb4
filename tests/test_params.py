from __future__ import annotations

import os

import pytest

from sigtask.config.types import ReportFormat, TaskOptions
from sigtask.params.builder import build_base_params, build_params


def _options(**overrides) -> TaskOptions:
    fields = dict(
        id="t",
        package_names=("javax.swing",),
        classpath=("a.jar",),
        file_name="swing.sig",
    )
    fields.update(overrides)
    return TaskOptions(**fields)


def test_static_marker_always_present() -> None:
    assert build_params(_options(), []) == ["-Static"]


def test_base_params_are_kept_in_front() -> None:
    params = build_params(_options(debug=True), ["-Classpath", "a.jar"])
    assert params == ["-Classpath", "a.jar", "-Static", "-Debug"]


def test_base_params_list_is_not_mutated() -> None:
    base = ["-FileName", "x.sig"]
    build_params(_options(binary=True), base)
    assert base == ["-FileName", "x.sig"]


def test_binary_mode_flag_is_followed_by_value() -> None:
    params = build_params(_options(binary=True), [])
    i = params.index("-Mode")
    assert params[i + 1] == "bin"


@pytest.mark.parametrize("binary", [False, True])
def test_backward_wins_over_human(binary: bool) -> None:
    fmt = ReportFormat.from_flags(backward=True, human=True)
    params = build_params(_options(binary=binary, report_format=fmt), [])
    assert "-Backward" in params
    assert "-FormatHuman" not in params


def test_binary_does_not_suppress_report_format() -> None:
    params = build_params(
        _options(binary=True, report_format=ReportFormat.HUMAN), []
    )
    assert params == ["-Static", "-Mode", "bin", "-FormatHuman"]


@pytest.mark.parametrize(
    "backward, human, expected",
    [
        (False, False, ReportFormat.PLAIN),
        (True, False, ReportFormat.BACKWARD),
        (False, True, ReportFormat.HUMAN),
        (True, True, ReportFormat.BACKWARD),
    ],
)
def test_report_format_from_flags(backward, human, expected) -> None:
    assert ReportFormat.from_flags(backward, human) is expected


def test_output_flag_is_followed_by_path() -> None:
    params = build_params(_options(output="report.txt"), [])
    assert params == ["-Static", "-Out", "report.txt"]


@pytest.mark.parametrize("output", [None, ""])
def test_empty_output_is_skipped(output) -> None:
    assert "-Out" not in build_params(_options(output=output), [])


def test_error_all_flag_is_reachable() -> None:
    params = build_params(_options(error_all=True), [])
    assert params == ["-Static", "-ErrorAll"]


def test_error_all_does_not_turn_on_debug() -> None:
    assert "-Debug" not in build_params(_options(error_all=True), [])


def test_full_ordering() -> None:
    options = _options(
        binary=True,
        report_format=ReportFormat.BACKWARD,
        output="out.txt",
        debug=True,
        error_all=True,
    )
    assert build_params(options, ["BASE"]) == [
        "BASE",
        "-Static",
        "-Mode",
        "bin",
        "-Backward",
        "-Out",
        "out.txt",
        "-Debug",
        "-ErrorAll",
    ]


def test_base_params_render_options() -> None:
    options = _options(
        classpath=("a.jar", "b.jar"),
        package_names=("p", "q"),
        api_version="1.0",
        exclude=("p.Hidden",),
    )
    assert build_base_params(options) == [
        "-Classpath",
        os.pathsep.join(["a.jar", "b.jar"]),
        "-FileName",
        "swing.sig",
        "-ApiVersion",
        "1.0",
        "-Package",
        "p",
        "-Package",
        "q",
        "-Exclude",
        "p.Hidden",
    ]


def test_base_params_skip_missing_api_version() -> None:
    assert "-ApiVersion" not in build_base_params(_options())
