"""🎯 Sample Values - Pick the value shown in ``name = value``.

Policy, first match wins:
1. The documented default, if non-empty and at most 16 characters
2. The first enum key, in documentation order
3. The configured fallback literal (e.g. ``abc123``)

When the fallback is disallowed, rule 3 raises instead of guessing.
"""

from __future__ import annotations

from ..errors import SampleValueError
from ..models import ConfigOption

MAX_DEFAULT_LENGTH = 16
DEFAULT_FALLBACK_VALUE = "abc123"


class SampleValueResolver:
    """Resolve sample values for options.

    Example:
        resolver = SampleValueResolver(fallback_value="abc123")
        resolver.resolve(ConfigOption(name="timeout", default="30"))
        # → "30"
    """

    def __init__(
        self,
        fallback_value: str = DEFAULT_FALLBACK_VALUE,
        allow_fallback: bool = True,
    ) -> None:
        self.fallback_value = fallback_value
        self.allow_fallback = allow_fallback

    def resolve(self, option: ConfigOption) -> str:
        """Return the sample value for an option.

        Raises:
            SampleValueError: If only the fallback applies and it is disallowed
        """
        default = option.default
        if default and len(default) <= MAX_DEFAULT_LENGTH:
            return default

        first_key = option.first_enum_key
        if first_key is not None:
            return first_key

        if not self.allow_fallback:
            raise SampleValueError(option.name)
        return self.fallback_value
