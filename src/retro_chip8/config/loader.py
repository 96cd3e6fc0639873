import yaml
from typing import Dict, Any

from retro_chip8.common.errors import ConfigError
from .models import HostConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> HostConfig:
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Could not read config '{path}': {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config '{path}': {e}") from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> HostConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping.")

        defaults = HostConfig()
        key_map = dict(defaults.key_map)
        for name, key in (data.get("key_map") or {}).items():
            value = self._parse_int(key)
            if not 0 <= value <= 0xF:
                raise ConfigError(f"Key '{name}' mapped to {value}, expected 0x0-0xF")
            key_map[str(name)] = value

        scale = self._parse_int(data.get("scale", defaults.scale))
        interval = self._parse_int(data.get("frame_interval_ms", defaults.frame_interval_ms))
        if scale <= 0 or interval <= 0:
            raise ConfigError("scale and frame_interval_ms must be positive.")

        return HostConfig(
            scale=scale,
            frame_interval_ms=interval,
            foreground=str(data.get("foreground", defaults.foreground)),
            background=str(data.get("background", defaults.background)),
            window_title=str(data.get("window_title", defaults.window_title)),
            key_map=key_map,
            quit_key=str(data.get("quit_key", defaults.quit_key)),
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
