#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from .camera import FOCAL_MIN, FOCAL_MAX
from .color import parse_hex_color
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'wireframe_cube.yaml'


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the rendering pipeline. Read-only once loaded."""
    view_width: int = 32
    view_height: int = 32
    width: float = 10.0
    height: float = 10.0
    depth: float = 10.0
    rotate_speed: float = 90.0      # degrees per second
    focal_length: float = 64.0
    fps: float = 30.0
    legacy_mode: bool = False
    clear_screen: bool = True
    color: bool = True
    full_rotation: bool = True
    vertex_color: str = '#FF0000'
    edge_color: str = '#00FF00'
    background_color: str = '#000000'

    def __post_init__(self):
        self.validate()

    @property
    def extents(self):
        return (self.width, self.height, self.depth)

    @property
    def frame_delay(self) -> float:
        """Seconds to sleep between frames (1000 / FPS milliseconds)."""
        return 1.0 / self.fps

    @property
    def rotate_step(self) -> float:
        """Per-frame angle increment in radians."""
        return math.radians(self.rotate_speed) / self.fps

    def validate(self):
        for name in ('view_width', 'view_height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name.upper()} must be a positive integer, got {value!r}")
        for name in ('width', 'height', 'depth', 'fps', 'focal_length'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name.upper()} must be a positive number, got {value!r}")
        if not FOCAL_MIN <= self.focal_length <= FOCAL_MAX:
            raise ConfigError(f"FOCAL_LENGTH must be within 10..100, got {self.focal_length!r}")
        if isinstance(self.rotate_speed, bool) or not isinstance(self.rotate_speed, (int, float)) \
                or not math.isfinite(self.rotate_speed):
            raise ConfigError(f"ROTATE_SPEED must be a number, got {self.rotate_speed!r}")
        for name in ('legacy_mode', 'clear_screen', 'color', 'full_rotation'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name.upper()} must be true or false, got {value!r}")
        for name in ('vertex_color', 'edge_color', 'background_color'):
            value = getattr(self, name)
            if parse_hex_color(value) is None:
                raise ConfigError(f"{name.upper()} must be a #RRGGBB color, got {value!r}")

    def to_dict(self):
        """Config file representation (upper-case keys)."""
        return {f.name.upper(): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data) -> 'RenderConfig':
        """
        Build a config from a mapping of upper-case keys.
        Every key is required; unknown keys are ignored with a warning.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping of KEY: value, got {type(data).__name__}")

        names = [f.name for f in fields(cls)]
        missing = [n.upper() for n in names if n.upper() not in data]
        if missing:
            raise ConfigError(f"missing config field(s): {', '.join(missing)}")

        known = {n.upper() for n in names}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key %r", key)

        kwargs = {n: data[n.upper()] for n in names}
        # YAML reads whole numbers as int; accept them for float fields.
        for n in ('width', 'height', 'depth', 'rotate_speed', 'focal_length', 'fps'):
            v = kwargs[n]
            if isinstance(v, int) and not isinstance(v, bool):
                kwargs[n] = float(v)
        return cls(**kwargs)

    def with_overrides(self, **changes) -> 'RenderConfig':
        """Copy with the given fields replaced; None values are skipped."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


def write_default_config(path) -> RenderConfig:
    """Create a config file holding the documented defaults."""
    config = RenderConfig()
    path = Path(path)
    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8') as fp:
            yaml.safe_dump(config.to_dict(), fp, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"could not create default config '{path}': {e}") from e
    logger.info("Created default config at %s", path)
    return config


def load_config(path=None) -> RenderConfig:
    """
    Load the render configuration from a YAML file.
    A missing file is created with defaults first. Any other problem is fatal.
    """
    path = Path(path or os.environ.get('WIREFRAME_CUBE_CONFIG', DEFAULT_CONFIG_PATH))
    if not path.exists():
        logger.info("Config %s not found, writing defaults", path)
        write_default_config(path)

    try:
        with path.open('r', encoding='utf-8') as fp:
            data = yaml.safe_load(fp)
    except OSError as e:
        raise ConfigError(f"could not read config '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"could not parse config '{path}': {e}") from e

    if data is None:
        raise ConfigError(f"config '{path}' is empty")
    try:
        config = RenderConfig.from_dict(data)
    except TypeError as e:
        raise ConfigError(f"invalid config '{path}': {e}") from e
    logger.debug("Loaded config from %s: %s", path, config)
    return config
