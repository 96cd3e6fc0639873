import pytest

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import HostConfig, DEFAULT_KEY_MAP
from retro_chip8.common.errors import ConfigError


class TestHostConfig:
    def test_defaults(self):
        config = HostConfig()
        assert config.scale == 10
        assert config.frame_interval_ms == 16
        assert config.key_map == DEFAULT_KEY_MAP
        assert config.key_map["X"] == 0x0
        assert config.key_map["V"] == 0xF
        assert config.quit_key == "Escape"

    def test_key_map_not_shared(self):
        a = HostConfig()
        a.key_map["X"] = 0x5
        assert HostConfig().key_map["X"] == 0x0


class TestConfigLoader:
    def test_load_overrides(self, tmp_path):
        path = tmp_path / "host.yaml"
        path.write_text(
            "scale: 8\n"
            "frame_interval_ms: '0x10'\n"
            "foreground: '#00FF00'\n"
            "key_map:\n"
            "  X: 0x5\n"
            "  Up: 2\n"
        )
        config = ConfigLoader().load_from_file(str(path))
        assert config.scale == 8
        assert config.frame_interval_ms == 16
        assert config.foreground == "#00FF00"
        assert config.background == "#000000"
        assert config.key_map["X"] == 0x5
        assert config.key_map["Up"] == 0x2
        assert config.key_map["1"] == 0x1

    def test_numeric_key_names(self, tmp_path):
        path = tmp_path / "host.yaml"
        path.write_text("key_map:\n  5: 0xC\n")
        config = ConfigLoader().load_from_file(str(path))
        assert config.key_map["5"] == 0xC

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigLoader().load_from_file(str(path)) == HostConfig()

    def test_key_out_of_range(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("key_map:\n  X: 16\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_file(str(path))

    def test_invalid_integer(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scale: big\n")
        with pytest.raises(ConfigError, match="Invalid integer format"):
            ConfigLoader().load_from_file(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scale: [1, 2\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_file(str(tmp_path / "none.yaml"))

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_file(str(path))
