"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy service construction, manifest input,
clipboard access, and centralized result emission (stdout/stderr routing
+ exit codes).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click

from kubeviz.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from kubeviz.config.settings import KubevizSettings
    from kubeviz.plugins.manager import PluginManager
    from kubeviz.services.result import ServiceResult
    from kubeviz.services.share import ShareService
    from kubeviz.services.visualize import VisualizationSession, VisualizeService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Plugins and services
    are created on first use so ``--help`` and ``--version`` never load
    entry points.
    """

    def __init__(self, settings: KubevizSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._visualizer: VisualizeService | None = None
        self._session: VisualizationSession | None = None

        # Configure structured logging
        from kubeviz.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from kubeviz.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points loaded on first access)."""
        if self._plugins is None:
            from kubeviz.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    @property
    def visualizer(self) -> VisualizeService:
        if self._visualizer is None:
            from kubeviz.services.visualize import VisualizeService

            self._visualizer = VisualizeService(self.settings, plugins=self.plugins)
        return self._visualizer

    @property
    def session(self) -> VisualizationSession:
        """Visualization session holding the last successful diagram."""
        if self._session is None:
            from kubeviz.services.visualize import VisualizationSession

            self._session = VisualizationSession(self.visualizer)
        return self._session

    @property
    def sharer(self) -> ShareService:
        from kubeviz.services.share import ShareService

        return ShareService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def read_manifests(self, files: Sequence[str], *, op: str) -> str:
        """Read and join manifest sources; no files means standard input.

        A read failure is emitted as a ``READ_ERROR`` result for *op*.
        """
        from kubeviz.domain.errors import ManifestReadError
        from kubeviz.infrastructure.sources import STDIN_MARKER, read_sources
        from kubeviz.services.result import ErrorCode, ServiceResult

        paths = list(files) or [STDIN_MARKER]
        try:
            return read_sources(paths, stdin=click.get_text_stream("stdin"))
        except ManifestReadError as exc:
            self.fail(ServiceResult.failure(op, ErrorCode.READ_ERROR, str(exc)))

    def write_output(self, path: str, content: str, *, op: str) -> None:
        """Write *content* to *path*; a failure is emitted as ``WRITE_ERROR``."""
        from kubeviz.services.result import ErrorCode, ServiceResult

        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as exc:
            self.fail(
                ServiceResult.failure(
                    op,
                    ErrorCode.WRITE_ERROR,
                    f"Error writing file: {path}",
                    reason=exc.strerror or str(exc),
                )
            )
        logger.debug("Wrote %s", path)

    def copy_to_clipboard(self, text: str) -> str | None:
        """Copy *text* to the clipboard; return the tool used, or None.

        Returns None when the clipboard is disabled in config or no tool
        accepted the text; callers then show the text for manual copying.
        """
        if not self.settings.clipboard.enabled:
            return None
        from kubeviz.domain.errors import ClipboardUnavailableError
        from kubeviz.infrastructure.clipboard import copy_to_clipboard

        try:
            return copy_to_clipboard(text)
        except ClipboardUnavailableError as exc:
            logger.info("Clipboard copy failed: %s", exc)
            return None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Emit a failed result and exit."""
        self.emit(result)
        raise SystemExit(1)
