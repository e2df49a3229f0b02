"""⚠️ Errors - Exception hierarchy for sample generation."""

from __future__ import annotations


class ConfsampleError(Exception):
    """Base exception for confsample operations."""

    pass


class DocumentationInputError(ConfsampleError):
    """Documentation file is missing or cannot be parsed."""

    pass


class SampleValueError(ConfsampleError):
    """No permissible sample value could be determined for an option.

    The resolver only knows the option; the renderer fills in the file and
    section before re-raising so the message names all three.
    """

    def __init__(
        self,
        option: str,
        section: str | None = None,
        config_file: str | None = None,
    ) -> None:
        self.option = option
        self.section = section
        self.config_file = config_file
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = ""
        if self.config_file:
            prefix += f"{self.config_file}: "
        if self.section is not None:
            prefix += f"[{self.section}] "
        return f"{prefix}Could not determine sample value to use for option {self.option}"

    def in_context(self, section: str | None, config_file: str) -> SampleValueError:
        """Return a copy of this error naming the owning section and file."""
        return SampleValueError(self.option, section=section, config_file=config_file)


class ModuleIndexError(ConfsampleError):
    """The in-tree module list could not be fetched."""

    pass


class OutputWriteError(ConfsampleError):
    """A sample file could not be created or written."""

    pass
