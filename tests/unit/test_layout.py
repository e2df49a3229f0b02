"""🧪 Tests for per-section column layout."""

import pytest

from confsample.errors import SampleValueError
from confsample.models import ConfigOption
from confsample.render.layout import SectionLayout, compute_layout, pair_width
from confsample.render.values import SampleValueResolver


@pytest.fixture
def resolver():
    return SampleValueResolver(fallback_value="abc123")


class TestComputeLayout:
    """Tests for compute_layout()."""

    def test_alignment_is_widest_pair(self, resolver):
        """Test alignment width = max(len(name) + len(value) + 3)."""
        options = [
            ConfigOption(name="name", default=""),  # name = abc123 -> 13
            ConfigOption(name="timeout", default="30"),  # timeout = 30 -> 12
        ]
        layout = compute_layout(options, resolver, wrap_width=135)

        assert layout.alignment_width == 13
        assert layout.comment_width == 122

    def test_later_option_widens_section(self, resolver):
        options = [
            ConfigOption(name="a", default="1"),
            ConfigOption(name="much_longer_option", default="value"),
        ]
        layout = compute_layout(options, resolver, wrap_width=135)

        assert layout.alignment_width == len("much_longer_option = value")

    def test_continuation_prefix(self, resolver):
        layout = compute_layout([ConfigOption(name="o", default="v")], resolver, 20)

        assert layout.alignment_width == 5
        assert layout.continuation_prefix == "\n" + " " * 5 + "  ; "
        assert layout.comment_indent == " " * 5 + "  ; "

    def test_narrow_wrap_width_clamps_to_one(self, resolver):
        """Test that a wrap width below the alignment never goes negative."""
        layout = compute_layout([ConfigOption(name="name", default="")], resolver, 10)

        assert layout.alignment_width == 13
        assert layout.comment_width == 1

    def test_empty_section(self, resolver):
        layout = compute_layout([], resolver, 135)
        assert layout == SectionLayout(alignment_width=0, comment_width=135)

    def test_unresolvable_option_raises(self):
        resolver = SampleValueResolver(allow_fallback=False)
        options = [ConfigOption(name="ok", default="1"), ConfigOption(name="secret")]

        with pytest.raises(SampleValueError, match="secret"):
            compute_layout(options, resolver, 135)


def test_pair_width():
    assert pair_width(ConfigOption(name="timeout"), "30") == len("timeout = 30")
