import math

import pytest
import yaml

from wireframe_cube.config import RenderConfig, load_config, write_default_config
from wireframe_cube.errors import ConfigError


def _write(path, data):
    path.write_text(yaml.safe_dump(data), encoding='utf-8')


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / 'cube.yaml'
    config = load_config(path)
    assert path.exists()
    assert config == RenderConfig()
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    assert data['VIEW_WIDTH'] == 32
    assert data['FOCAL_LENGTH'] == 64.0
    assert data['LEGACY_MODE'] is False


def test_round_trip_of_written_file(tmp_path):
    path = tmp_path / 'cube.yaml'
    write_default_config(path)
    assert load_config(path).to_dict() == RenderConfig().to_dict()


def test_values_are_read(tmp_path):
    path = tmp_path / 'cube.yaml'
    data = RenderConfig().to_dict()
    data.update(VIEW_WIDTH=25, VIEW_HEIGHT=20, FPS=60, ROTATE_SPEED=45,
                LEGACY_MODE=True, COLOR=False, EDGE_COLOR='#00ffff')
    _write(path, data)
    config = load_config(path)
    assert (config.view_width, config.view_height) == (25, 20)
    assert config.fps == 60.0 and isinstance(config.fps, float)
    assert config.legacy_mode and not config.color
    assert config.frame_delay == pytest.approx(1 / 60)
    assert config.rotate_step == pytest.approx(math.radians(45) / 60)


def test_fps_zero_is_a_config_error(tmp_path):
    path = tmp_path / 'cube.yaml'
    data = RenderConfig().to_dict()
    data['FPS'] = 0
    _write(path, data)
    with pytest.raises(ConfigError, match='FPS'):
        load_config(path)


def test_missing_field_is_a_config_error(tmp_path):
    path = tmp_path / 'cube.yaml'
    data = RenderConfig().to_dict()
    del data['FOCAL_LENGTH']
    del data['DEPTH']
    _write(path, data)
    with pytest.raises(ConfigError, match='DEPTH, FOCAL_LENGTH|FOCAL_LENGTH'):
        load_config(path)


def test_wrong_types_are_config_errors():
    data = RenderConfig().to_dict()
    for key, bad in [('VIEW_WIDTH', 12.5), ('VIEW_HEIGHT', -3), ('COLOR', 'yes'),
                     ('WIDTH', 'wide'), ('VERTEX_COLOR', 'red'), ('FPS', True)]:
        broken = dict(data, **{key: bad})
        with pytest.raises(ConfigError, match=key):
            RenderConfig.from_dict(broken)


def test_unparseable_file_is_a_config_error(tmp_path):
    path = tmp_path / 'cube.yaml'
    path.write_text('VIEW_WIDTH: [1, 2\n', encoding='utf-8')
    with pytest.raises(ConfigError, match='parse'):
        load_config(path)


def test_empty_or_scalar_file_is_a_config_error(tmp_path):
    path = tmp_path / 'cube.yaml'
    path.write_text('', encoding='utf-8')
    with pytest.raises(ConfigError):
        load_config(path)
    path.write_text('42\n', encoding='utf-8')
    with pytest.raises(ConfigError, match='mapping'):
        load_config(path)


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / 'cube.yaml'
    _write(path, dict(RenderConfig().to_dict(), SHADING=True))
    with caplog.at_level('WARNING', logger='wireframe_cube'):
        assert load_config(path) == RenderConfig()
    assert 'SHADING' in caplog.text


def test_write_failure_is_a_config_error(tmp_path):
    blocker = tmp_path / 'file'
    blocker.write_text('x')
    with pytest.raises(ConfigError, match='could not create'):
        load_config(blocker / 'cube.yaml')


def test_overrides():
    config = RenderConfig()
    assert config.with_overrides(fps=None) is config
    changed = config.with_overrides(legacy_mode=True, fps=12.0)
    assert changed.legacy_mode and changed.fps == 12.0
    with pytest.raises(ConfigError):
        config.with_overrides(fps=0.0)
