"""📚 Sample Generator - Orchestrate sample file generation.

For every configuration file in the DocModel:
- apply the name filter and the no-clobber rule
- render the whole file in memory
- write ``{output_dir}/{name}.sample`` in one go

Usage:
    generator = SampleGenerator(settings, module_index)
    report = generator.generate_all(doc_model)
    print(report.processed)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from .config import GeneratorSettings
from .errors import OutputWriteError, SampleValueError
from .models import ConfigFile, DocModel
from .render import ConfigRenderer, SampleValueResolver


class ModuleLookup(Protocol):
    def contains(self, module: str) -> bool: ...


@dataclass
class GenerationResult:
    """Result of generating the sample for one configuration file."""

    config_file: str
    path: Path
    written: bool = False
    skipped_reason: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


@dataclass
class GenerationReport:
    """Results for a whole run."""

    results: list[GenerationResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        """Number of configuration files processed (skips excluded)."""
        return sum(1 for r in self.results if not r.skipped)

    @property
    def failed(self) -> list[GenerationResult]:
        return [r for r in self.results if not r.success]

    @property
    def success(self) -> bool:
        return not self.failed


class SampleGenerator:
    """Generate sample configuration files for a DocModel."""

    def __init__(
        self,
        settings: GeneratorSettings,
        module_index: ModuleLookup,
        console: Console | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Generator settings
            module_index: Decides which modules link to the upstream docs
            console: Rich console for output (optional)
        """
        self.settings = settings
        self.module_index = module_index
        self.console = console or Console()
        self.renderer = ConfigRenderer(
            resolver=SampleValueResolver(
                fallback_value=settings.fallback_value,
                allow_fallback=settings.allow_fallback,
            ),
            wrap_width=settings.wrap_width,
            max_description_length=settings.max_description_length,
            link_prefix=settings.link_prefix,
        )

    def generate_all(self, doc_model: DocModel) -> GenerationReport:
        """Generate samples for every configuration file, in source order.

        Raises:
            OutputWriteError: If a sample file cannot be written
        """
        report = GenerationReport()

        for config_file in doc_model.files:
            result = self.generate(config_file)
            report.results.append(result)
            if not result.success and self.settings.fail_fast:
                break

        return report

    def generate(self, config_file: ConfigFile) -> GenerationResult:
        """Generate the sample for a single configuration file."""
        path = self.sample_path(config_file)
        result = GenerationResult(config_file=config_file.name, path=path)

        if self.settings.config_filter and config_file.name != self.settings.config_filter:
            return self._skip(result, "doesn't match filter")
        if self.settings.no_clobber and path.exists():
            return self._skip(result, "already exists")

        try:
            content = self.renderer.render_text(
                config_file, in_tree=self._in_tree(config_file)
            )
        except SampleValueError as e:
            # Name the real output path rather than the bare sample name
            error = e.in_context(e.section, str(path))
            result.errors.append(str(error))
            self.console.print(f"[red]Error:[/red] {escape(str(error))}")
            return result

        self._write_file(path, content)
        result.written = True
        self.console.print(f" -- Generated config {escape(str(path))}")
        return result

    def sample_path(self, config_file: ConfigFile) -> Path:
        """Output path for a configuration file's sample."""
        if self.settings.output_dir is not None:
            return self.settings.output_dir / config_file.sample_name
        return Path(config_file.sample_name)

    def _in_tree(self, config_file: ConfigFile) -> bool:
        if self.settings.offline:
            return False
        return self.module_index.contains(config_file.module)

    def _skip(self, result: GenerationResult, reason: str) -> GenerationResult:
        result.skipped_reason = reason
        if self.settings.verbose:
            self.console.print(f"[dim]   -- Skipping {escape(str(result.path))} ({reason})[/dim]")
        return result

    def _write_file(self, path: Path, content: str) -> None:
        """Write a rendered sample.

        Raises:
            OutputWriteError: On any I/O failure
        """
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Failed to open {path} for writing: {e}") from e
