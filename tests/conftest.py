"""🧪 Pytest configuration and shared fixtures."""

from io import StringIO

import pytest
from rich.console import Console

from confsample.models import ConfigFile, ConfigOption, ConfigSection


@pytest.fixture
def console():
    """Rich console writing to a buffer (read with console.file.getvalue())."""
    return Console(file=StringIO(), width=200, highlight=False, soft_wrap=True)


@pytest.fixture
def sample_config_file():
    """A small documented config file with default, enum and fallback options."""
    return ConfigFile(
        name="test.conf",
        module="app_test",
        synopsis="Test Application",
        sections=[
            ConfigSection(
                name="general",
                synopsis="General settings",
                options=[
                    ConfigOption(name="name", default="", synopsis="Account name"),
                    ConfigOption(
                        name="timeout",
                        default="30",
                        synopsis="Call timeout",
                        description=["Seconds to wait."],
                    ),
                    ConfigOption(
                        name="mode",
                        synopsis="Feature mode",
                        enum_values={"yes": "Enable feature", "no": "Disable feature"},
                    ),
                ],
            )
        ],
    )


@pytest.fixture
def sample_xml():
    """Sample XML documentation content."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE docs SYSTEM "appdocsxml.dtd">
<docs xmlns:xi="http://www.w3.org/2001/XInclude">
  <application name="ConfBridge" language="en_US">
    <synopsis>Conference bridge application.</synopsis>
  </application>
  <configInfo name="app_confbridge" language="en_US">
    <synopsis>Conference Bridge Application</synopsis>
    <configFile name="confbridge.conf">
      <configObject name="global">
        <synopsis>Unused, but reserved.</synopsis>
        <configOption name="type">
          <synopsis>Define this configuration category as 'global'.</synopsis>
          <description>
            <para>The section type.</para>
            <enumlist>
              <enum name="global"><para>Global settings</para></enum>
            </enumlist>
          </description>
        </configOption>
      </configObject>
      <configObject name="user_profile">
        <synopsis>A named profile to apply to specific callers.</synopsis>
        <configOption name="admin" default="no">
          <synopsis>Sets if the user is an admin or not</synopsis>
        </configOption>
        <configOption name="announce_join_leave">
          <synopsis>Prompt user for their name when joining a conference
            and play it to the conference when they enter</synopsis>
          <description>
            <para>Set to <literal>yes</literal> to announce the
            user.</para>
          </description>
        </configOption>
      </configObject>
    </configFile>
  </configInfo>
  <configInfo name="res_custom" language="en_US">
    <synopsis>Custom resource</synopsis>
    <configFile name="custom.conf">
      <configObject name="general">
        <synopsis>General options</synopsis>
        <configOption name="secret">
          <synopsis>Shared secret</synopsis>
        </configOption>
      </configObject>
    </configFile>
  </configInfo>
</docs>
"""


@pytest.fixture
def sample_xml_file(tmp_path, sample_xml):
    """Sample XML documentation written to disk."""
    path = tmp_path / "core-en_US.xml"
    path.write_text(sample_xml)
    return path


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Keep settings and the module cache out of the real environment."""
    for name in ("WRAP_WIDTH", "MAX_DESCRIPTION_LENGTH", "FALLBACK_VALUE", "ALLOW_FALLBACK"):
        monkeypatch.delenv(f"CONFSAMPLE_{name}", raising=False)
    monkeypatch.setenv("CONFSAMPLE_MODULE_CACHE_PATH", str(tmp_path / "modules.html"))
