from __future__ import annotations

import os

from sigtask.config.types import ReportFormat, TaskOptions

CLASSPATH_OPTION = "-Classpath"
FILENAME_OPTION = "-FileName"
API_VERSION_OPTION = "-ApiVersion"
PACKAGE_OPTION = "-Package"
EXCLUDE_OPTION = "-Exclude"

STATIC_OPTION = "-Static"
MODE_OPTION = "-Mode"
BINARY_MODE = "bin"
BACKWARD_OPTION = "-Backward"
FORMAT_HUMAN_OPTION = "-FormatHuman"
OUT_OPTION = "-Out"
DEBUG_OPTION = "-Debug"
ERROR_ALL_OPTION = "-ErrorAll"


def build_base_params(options: TaskOptions) -> list[str]:
    params: list[str] = []

    params += [CLASSPATH_OPTION, os.pathsep.join(options.classpath)]
    params += [FILENAME_OPTION, options.file_name]

    if options.api_version:
        params += [API_VERSION_OPTION, options.api_version]

    for package in options.package_names:
        params += [PACKAGE_OPTION, package]

    for item in options.exclude:
        params += [EXCLUDE_OPTION, item]

    return params


def build_params(options: TaskOptions, base_params: list[str]) -> list[str]:
    params = list(base_params)
    params.append(STATIC_OPTION)

    if options.binary:
        params += [MODE_OPTION, BINARY_MODE]

    match options.report_format:
        case ReportFormat.BACKWARD:
            params.append(BACKWARD_OPTION)
        case ReportFormat.HUMAN:
            params.append(FORMAT_HUMAN_OPTION)
        case ReportFormat.PLAIN:
            pass

    if options.output:
        params += [OUT_OPTION, options.output]

    if options.debug:
        params.append(DEBUG_OPTION)

    if options.error_all:
        params.append(ERROR_ALL_OPTION)

    return params
