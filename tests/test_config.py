import pytest

from charcell_renderer import Camera, RenderConfig


def test_defaults():
    config = RenderConfig()
    assert config.background == ' '
    assert config.fov == 90.0
    assert config.use_culling


@pytest.mark.parametrize("kwargs", [
    dict(fov=0), dict(fov=180), dict(near_clip=0), dict(near_clip=-1),
    dict(far_plane=0.05), dict(cell_aspect=0), dict(projection_workers=-1),
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_detect_terminal_utf8(monkeypatch):
    monkeypatch.setenv('TERM', 'xterm-256color')
    monkeypatch.setenv('LANG', 'en_US.UTF-8')
    config = RenderConfig.detect_terminal()
    assert config.solid_char == '█'
    assert config.cell_aspect == 0.5


def test_detect_terminal_linux_console(monkeypatch):
    monkeypatch.setenv('TERM', 'linux')
    monkeypatch.setenv('LANG', 'en_US.UTF-8')
    assert RenderConfig.detect_terminal().solid_char == '#'


def test_detect_terminal_overrides(monkeypatch):
    monkeypatch.delenv('LANG', raising=False)
    config = RenderConfig.detect_terminal(fov=60.0, use_culling=False)
    assert config.fov == 60.0
    assert not config.use_culling
    assert config.solid_char == '#'


def test_camera_from_config():
    config = RenderConfig(fov=70.0, near_clip=0.5, far_plane=40.0, cell_aspect=0.5)
    cam = Camera.from_config(30, 10, config)
    assert (cam.fov, cam.near, cam.far, cam.cell_aspect) == (70.0, 0.5, 40.0, 0.5)
