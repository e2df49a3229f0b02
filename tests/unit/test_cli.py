"""🧪 Tests for the confsample command line."""

import pytest

from confsample import cli


def run_cli(*argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(list(argv))
    return excinfo.value.code


class TestCli:
    """Tests for cli.main()."""

    def test_generates_all_samples(self, tmp_path, sample_xml_file, capsys):
        out = tmp_path / "out"
        out.mkdir()

        code = run_cli("--offline", "-o", str(out), str(sample_xml_file))

        assert code == 0
        assert (out / "confbridge.conf.sample").exists()
        assert (out / "custom.conf.sample").exists()
        assert "2 configs processed" in capsys.readouterr().out

    def test_config_filter(self, tmp_path, sample_xml_file, capsys):
        code = run_cli(
            "--offline", "-o", str(tmp_path), "-c", "custom.conf", "-v", str(sample_xml_file)
        )

        assert code == 0
        assert not (tmp_path / "confbridge.conf.sample").exists()
        output = capsys.readouterr().out
        assert "1 config processed" in output
        assert "Skipping" in output

    def test_wrap_and_sample_value_flags(self, tmp_path, sample_xml_file):
        run_cli("--offline", "-o", str(tmp_path), "-s", "xyz", "-w", "60", str(sample_xml_file))

        text = (tmp_path / "custom.conf.sample").read_text()
        assert ";secret = xyz ; Shared secret" in text

    def test_nosampval_fails(self, tmp_path, sample_xml_file, capsys):
        code = run_cli("--offline", "-o", str(tmp_path), "-p", str(sample_xml_file))

        assert code == 1
        assert "Could not determine sample value" in capsys.readouterr().out
        assert not (tmp_path / "custom.conf.sample").exists()

    def test_missing_input(self, tmp_path, capsys):
        code = run_cli("--offline", str(tmp_path / "missing.xml"))

        assert code == 2
        assert "does not exist" in capsys.readouterr().out

    def test_settings_file(self, tmp_path, sample_xml_file):
        settings_file = tmp_path / "confsample.yaml"
        settings_file.write_text(f"output_dir: {tmp_path}\noffline: true\nfallback_value: fromyaml\n")

        code = run_cli("--settings", str(settings_file), str(sample_xml_file))

        assert code == 0
        assert "fromyaml" in (tmp_path / "custom.conf.sample").read_text()

    def test_invalid_settings_file(self, tmp_path, sample_xml_file):
        settings_file = tmp_path / "confsample.yaml"
        settings_file.write_text("wrap_width: -5\n")

        assert run_cli("--settings", str(settings_file), str(sample_xml_file)) == 2

    def test_usage_without_input(self):
        assert run_cli() == 2

    def test_corrupt_module_cache_is_fatal(self, tmp_path, sample_xml_file, monkeypatch, capsys):
        cache = tmp_path / "modules.html"
        cache.write_bytes(b"\xff\xfe\xff")
        monkeypatch.setenv("CONFSAMPLE_MODULE_CACHE_PATH", str(cache))

        code = run_cli("-o", str(tmp_path), str(sample_xml_file))

        assert code == 1
        output = capsys.readouterr().out
        assert "Error:" in output
        assert "Failed to read module cache" in output
