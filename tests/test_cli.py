import pytest
import yaml

from wireframe_cube import cli
from wireframe_cube.config import RenderConfig


def test_parse_args_defaults_leave_config_alone():
    args = cli.parse_args([])
    assert args.legacy_mode is None
    assert args.color is None
    assert args.clear_screen is None
    assert args.fps is None and args.frames is None


def test_parse_args_flags():
    args = cli.parse_args(['--legacy', '--no-color', '--no-clear', '--fps', '12', '--frames', '3'])
    assert args.legacy_mode is True
    assert args.color is False and args.clear_screen is False
    assert args.fps == 12.0 and args.frames == 3
    assert cli.parse_args(['--fast']).legacy_mode is False
    with pytest.raises(SystemExit):
        cli.parse_args(['--fast', '--legacy'])


@pytest.mark.parametrize('value', ['0', '-2', 'many'])
def test_frames_must_be_positive(value, capsys):
    with pytest.raises(SystemExit):
        cli.parse_args(['--frames', value])
    assert '--frames' in capsys.readouterr().err


def test_main_runs_with_overrides(tmp_path, monkeypatch):
    seen = {}

    def fake_run(config, mesh, max_frames=None):
        seen.update(config=config, mesh=mesh, max_frames=max_frames)

    monkeypatch.setattr(cli, 'run_demo', fake_run)
    path = tmp_path / 'cube.yaml'
    assert cli.main(['--config', str(path), '--legacy', '--fps', '10', '--frames', '2']) == 0
    assert path.exists()
    assert seen['config'].legacy_mode and seen['config'].fps == 10.0
    assert len(seen['mesh'].edges) == 12
    assert seen['max_frames'] == 2


def test_main_reports_config_errors(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(cli, 'run_demo', lambda *a, **k: pytest.fail("should not run"))
    path = tmp_path / 'cube.yaml'
    path.write_text(yaml.safe_dump(dict(RenderConfig().to_dict(), FPS=0)), encoding='utf-8')
    assert cli.main(['--config', str(path)]) == 1
    err = capsys.readouterr().err
    assert 'Error:' in err and 'FPS' in err


def test_main_reports_bad_model(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(cli, 'run_demo', lambda *a, **k: pytest.fail("should not run"))
    path = tmp_path / 'cube.yaml'
    assert cli.main(['--config', str(path), '--model', str(tmp_path / 'nope.obj')]) == 1
    assert 'could not load' in capsys.readouterr().err


def test_keyboard_interrupt_exits_cleanly(tmp_path, monkeypatch):
    def interrupted(*a, **k):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, 'run_demo', interrupted)
    assert cli.main(['--config', str(tmp_path / 'cube.yaml')]) == 0
