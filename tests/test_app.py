from mandelframe.app import FrameViewerApp
from mandelframe.config import DEFAULT_SETTINGS


def make_app(**overrides):
    settings = dict(DEFAULT_SETTINGS, window_width=40, window_height=20, **overrides)
    return FrameViewerApp(settings)


def test_initial_state_is_centred():
    app = make_app()
    assert (app.mouse_x, app.mouse_y) == (20, 10)
    assert app.scale_factor == 1.0
    assert app.pending_render


def test_pan_is_clamped_to_canvas():
    app = make_app()
    app.handle_pan((100, -5), current_time=10)
    assert (app.mouse_x, app.mouse_y) == (39, 0)
    assert app.last_action_time == 10


def test_zoom_multiplies_scale_and_pans_to_cursor():
    app = make_app(zoom_in_factor=2.0, zoom_out_factor=0.5)
    app.handle_zoom(1, (5, 6), current_time=0)
    app.handle_zoom(1, (5, 6), current_time=0)
    assert app.scale_factor == 4.0
    assert (app.mouse_x, app.mouse_y) == (5, 6)
    app.handle_zoom(-1, (5, 6), current_time=0)
    assert app.scale_factor == 2.0


def test_reset_restores_default_view():
    app = make_app(initial_scale=1.5)
    app.handle_zoom(1, (1, 1), current_time=0)
    app.reset()
    assert app.scale_factor == 1.5
    assert (app.mouse_x, app.mouse_y) == (20, 10)
