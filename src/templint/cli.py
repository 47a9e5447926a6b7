"""Command-line entry point: ``templint <file-or-directory> [options]``.

Options are the fields of :class:`~templint.settings.Settings`
(``--context_padding 20``, ``--check_policy gated``, ``--recursive true`` ...)
and fall back to ``TEMPLINT_*`` environment variables and ``.env``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic_settings import CliPositionalArg, SettingsConfigDict

from templint import __version__
from templint.models.report import BatchReport
from templint.service.analyzer import TemplateAnalyzer
from templint.service.discovery import DocumentNotFoundError, discover
from templint.settings import Settings

logger = logging.getLogger("templint.cli")

EXIT_OK = 0
EXIT_FAILED_DOCUMENTS = 1
EXIT_DIAGNOSTICS = 2


class LintCommand(Settings):
    """Check mail-merge templates for unbalanced braces and IF/END IF pairs."""

    model_config = SettingsConfigDict(cli_prog_name="templint")

    target: CliPositionalArg[Path]
    strict: bool = False  # exit 2 when any diagnostic is produced


def write_report(batch: BatchReport, out: TextIO) -> None:
    for report in batch.documents:
        print(f"----file={report.document}", file=out)
        if report.error is not None:
            print(f"!!!! {report.error}", file=out)
            continue
        for line in report.lines():
            print(line, file=out)


def run(command: LintCommand, out: TextIO = sys.stdout) -> int:
    """Analyze ``command.target`` and print the report; returns the exit code."""
    paths = discover(command.target, command.extensions, recursive=command.recursive)
    batch = TemplateAnalyzer(command).analyze_paths(paths)
    write_report(batch, out)

    if batch.failed:
        return EXIT_FAILED_DOCUMENTS
    if command.strict and batch.diagnostic_count:
        return EXIT_DIAGNOSTICS
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    command = LintCommand(_cli_parse_args=list(argv) if argv is not None else True)

    logging.basicConfig(level=command.log_level.upper())
    logger.info("templint v%s checking %s", __version__, command.target)

    try:
        return run(command)
    except DocumentNotFoundError as exc:
        logger.error("%s", exc)
        return EXIT_FAILED_DOCUMENTS


if __name__ == "__main__":
    sys.exit(main())
