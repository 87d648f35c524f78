"""
Property-based tests for DirscanConfig serialization and env overrides.
"""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dirscan.core.config import DirscanConfig, LoggingConfig, ScanSettings, load_config

# Strategies for generating valid configuration values
scan_pattern = st.from_regex(r"[a-zA-Z0-9_\-\*\./]+", fullmatch=True).filter(
    lambda s: len(s) > 0
)

safe_text = st.text(
    alphabet=st.characters(
        whitelist_categories=("L", "N", "P", "S"),
        blacklist_characters="\x00\n\r\t",
    ),
    min_size=1,
    max_size=50,
).filter(lambda s: s.strip() != "")

log_level = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


@st.composite
def scan_settings_strategy(draw):
    """Generate valid ScanSettings instances."""
    return ScanSettings(
        includes=draw(st.lists(scan_pattern, min_size=0, max_size=10)),
        excludes=draw(st.lists(scan_pattern, min_size=0, max_size=10)),
        use_default_excludes=draw(st.booleans()),
        case_sensitive=draw(st.booleans()),
        follow_symlinks=draw(st.booleans()),
    )


@st.composite
def dirscan_config_strategy(draw):
    """Generate valid DirscanConfig instances."""
    return DirscanConfig(
        scan=draw(scan_settings_strategy()),
        logging=LoggingConfig(level=draw(log_level), format=draw(safe_text)),
    )


@given(config=dirscan_config_strategy())
@settings(max_examples=100, deadline=None)
def test_config_yaml_round_trip(config: DirscanConfig):
    """Saving to YAML and loading back yields an equivalent configuration."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yaml_path = Path(tmpdir) / "config.yaml"

        config.save(yaml_path)
        loaded_config = DirscanConfig.from_file(yaml_path)

        assert config.to_dict() == loaded_config.to_dict()


@given(config=dirscan_config_strategy())
@settings(max_examples=100, deadline=None)
def test_config_json_round_trip(config: DirscanConfig):
    """Saving to JSON and loading back yields an equivalent configuration."""
    with tempfile.TemporaryDirectory() as tmpdir:
        json_path = Path(tmpdir) / "config.json"

        config.save(json_path)
        loaded_config = DirscanConfig.from_file(json_path)

        assert config.to_dict() == loaded_config.to_dict()


class TestDefaults:
    def test_defaults_from_yaml(self):
        config = DirscanConfig()

        assert config.scan.includes == []
        assert config.scan.excludes == []
        assert config.scan.use_default_excludes is True
        assert config.scan.case_sensitive is True
        assert config.scan.follow_symlinks is True
        assert config.logging.level == "WARNING"

    def test_default_lists_are_not_shared(self):
        first = DirscanConfig()
        first.scan.includes.append("**/*.py")

        assert DirscanConfig().scan.includes == []

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "dirscan.yaml"
        path.write_text("scan:\n  includes:\n    - '**/*.py'\n", encoding="utf-8")

        config = DirscanConfig.from_file(path)

        assert config.scan.includes == ["**/*.py"]
        assert config.scan.follow_symlinks is True
        assert config.logging.level == "WARNING"


class TestFileErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DirscanConfig.from_file(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="Unsupported"):
            DirscanConfig.from_file(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("scan: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            DirscanConfig.from_file(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"scan": ', encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            DirscanConfig.from_file(path)

    def test_unknown_key_in_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("scan:\n  include:\n    - '*.dat'\n", encoding="utf-8")

        with pytest.raises(ValueError, match="include"):
            DirscanConfig.from_file(path)

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"scanner": {}}', encoding="utf-8")

        with pytest.raises(ValueError, match="scanner"):
            DirscanConfig.from_file(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            DirscanConfig.from_file(path)


class TestEnvOverrides:
    def test_pattern_lists_from_env(self, monkeypatch):
        monkeypatch.setenv("DIRSCAN_SCAN_INCLUDES", "**/*.py, **/*.pyi,")
        monkeypatch.setenv("DIRSCAN_SCAN_EXCLUDES", "build/")

        config = load_config()

        assert config.scan.includes == ["**/*.py", "**/*.pyi"]
        assert config.scan.excludes == ["build/"]

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("1", True), ("YES", True), ("on", True), ("false", False), ("0", False)],
    )
    def test_boolean_overrides(self, monkeypatch, raw, expected):
        monkeypatch.setenv("DIRSCAN_SCAN_FOLLOW_SYMLINKS", raw)
        monkeypatch.setenv("DIRSCAN_SCAN_CASE_SENSITIVE", raw)

        config = load_config()

        assert config.scan.follow_symlinks is expected
        assert config.scan.case_sensitive is expected

    def test_env_overrides_file(self, monkeypatch, tmp_path):
        path = tmp_path / "dirscan.json"
        path.write_text('{"logging": {"level": "DEBUG"}}', encoding="utf-8")
        monkeypatch.setenv("DIRSCAN_LOGGING_LEVEL", "ERROR")

        assert load_config(path).logging.level == "ERROR"
        assert load_config(path, apply_env=False).logging.level == "DEBUG"
