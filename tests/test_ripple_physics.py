import math

import numpy as np
import pytest

from entropyzero.ripple_model import (
    ColorScheme,
    RippleTankConfig,
    ToolType,
    WaveField,
    Waveform,
)
from entropyzero.ripple_physics import (
    CameraFit,
    RippleTank,
    apply_wave_sources,
    colorize,
    fit_camera,
    hsl_to_rgb,
    rasterize_obstacles,
    step_wave_field,
)
from entropyzero.ripple_scene import Scene
from entropyzero.vector import Vec2

W, H = 100, 60
CX, CY = 50, 30


def small_field():
    return WaveField(W, H)


def empty_scene():
    return Scene(with_default_source=False)


# ── camera ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("show", [False, True])
@pytest.mark.parametrize("size", [(1680, 840), (800, 600), (3000, 1000)])
def test_fit_camera_contains_grid(size, show):
    fit = fit_camera(size[0], size[1], show)
    available_w = max(size[0] - 400.0, 100.0)
    available_h = max(size[1] - 40.0 - (150.0 if show else 0.0), 100.0)
    assert fit.scale * available_w >= 1280.0
    assert fit.scale * available_h >= 800.0


def test_fit_camera_small_windows_clamp():
    assert fit_camera(0, 0, False) == fit_camera(50, 50, False)


def test_fit_camera_offsets_follow_panels():
    plain = fit_camera(1680, 840, False)
    with_panel = fit_camera(1680, 840, True)
    assert isinstance(plain, CameraFit)
    assert plain.x > 0
    assert plain.y < 0
    assert with_panel.y > 0
    assert with_panel.scale >= plain.scale


# ── colours ────────────────────────────────────────────────────────────────


def test_hsl_pure_red():
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)


@pytest.mark.parametrize("hue", [0, 60, 200, 359])
def test_hsl_extremes_of_lightness(hue):
    white = hsl_to_rgb(hue, 80, 100)
    black = hsl_to_rgb(hue, 80, 0)
    assert white[0] == white[1] == white[2]
    assert black == (0, 0, 0)
    assert white[0] > 250


def test_hsl_channels_in_range():
    for hue in range(0, 361, 7):
        for channel in hsl_to_rgb(hue, 80, 50):
            assert 0 <= channel <= 255


def test_colorize_shape_and_alpha():
    field = small_field()
    image = colorize(field, ColorScheme.DEEP_OCEAN)
    assert image.shape == (H, W, 4)
    assert np.all(image[..., 3] == 255)


def test_colorize_walls_are_grey():
    field = small_field()
    field.obstacle_map[field.idx(3, 4)] = 0.0
    for scheme in ColorScheme:
        image = colorize(field, scheme)
        assert tuple(image[4, 3]) == (60, 60, 70, 255)


def test_colorize_grayscale_saturates():
    field = small_field()
    field.current[field.idx(1, 1)] = 3.0
    field.current[field.idx(2, 1)] = -3.0
    image = colorize(field, ColorScheme.GRAYSCALE)
    assert tuple(image[1, 1, :3]) == (255, 255, 255)
    assert tuple(image[1, 2, :3]) == (0, 0, 0)


def test_colorize_scientific_ends():
    field = small_field()
    field.current[field.idx(1, 1)] = 2.0
    field.current[field.idx(2, 1)] = -2.0
    image = colorize(field, ColorScheme.SCIENTIFIC)
    assert image[1, 1, 0] == 0 and image[1, 1, 2] == 255
    assert image[1, 2, 0] == 255 and image[1, 2, 2] == 0


def test_colorize_phase_uses_palette():
    field = small_field()
    field.current[:] = 0.0
    image = colorize(field, ColorScheme.PHASE_COLOR)
    hue = int((math.atan2(0.0, 0.5) + math.pi) / math.tau * 360.0)
    assert tuple(image[0, 0, :3]) == hsl_to_rgb(hue, 80, 50)


# ── obstacles ──────────────────────────────────────────────────────────────


def test_reflector_blocks_its_footprint():
    field = small_field()
    scene = empty_scene()
    scene.spawn_reflector(Vec2.ZERO)
    rasterize_obstacles(field, scene)
    assert field.obstacle_map[field.idx(CX, CY)] == 0.0
    assert field.obstacle_map[field.idx(CX + 25, CY)] == 1.0
    assert field.obstacle_map[field.idx(CX, CY + 4)] == 1.0


def test_single_slit_leaves_gap():
    field = small_field()
    scene = empty_scene()
    scene.spawn_single_slit(Vec2.ZERO)
    rasterize_obstacles(field, scene)
    assert field.obstacle_map[field.idx(CX, CY)] == 1.0
    assert field.obstacle_map[field.idx(CX + 10, CY)] == 0.0
    assert field.obstacle_map[field.idx(CX - 10, CY)] == 0.0


def test_double_slit_two_gaps():
    field = small_field()
    scene = empty_scene()
    scene.spawn_double_slit(Vec2.ZERO)
    rasterize_obstacles(field, scene)
    assert field.obstacle_map[field.idx(CX, CY)] == 0.0
    assert field.obstacle_map[field.idx(CX + 7, CY)] == 1.0
    assert field.obstacle_map[field.idx(CX - 7, CY)] == 1.0
    assert field.obstacle_map[field.idx(CX + 20, CY)] == 0.0


def test_refraction_block_slows_waves():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_refraction_block(Vec2.ZERO)
    rasterize_obstacles(field, scene)
    expected = 1.0 / entity.obstacle.refractive_index
    assert field.obstacle_map[field.idx(CX, CY)] == pytest.approx(expected)


def test_zero_refractive_index_rejected():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_refraction_block(Vec2.ZERO)
    entity.obstacle.refractive_index = 0.0
    with pytest.raises(ValueError):
        rasterize_obstacles(field, scene)


def test_rasterize_resets_previous_obstacles():
    field = small_field()
    scene = empty_scene()
    scene.spawn_reflector(Vec2.ZERO)
    rasterize_obstacles(field, scene)
    assert field.obstacle_map[field.idx(CX, CY)] == 0.0
    rasterize_obstacles(field, [])
    assert float(field.obstacle_map.min()) == 1.0
    assert float(field.obstacle_map.max()) == 1.0


def test_obstacle_off_grid_is_ignored():
    field = small_field()
    scene = empty_scene()
    scene.spawn_reflector(Vec2(5000.0, -5000.0))
    rasterize_obstacles(field, scene)
    assert float(field.obstacle_map.min()) == 1.0
    assert float(field.obstacle_map.max()) == 1.0


# ── sources ────────────────────────────────────────────────────────────────


def test_point_source_sine():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_point_source(Vec2.ZERO)
    entity.wave_source.phase = math.pi / 2
    apply_wave_sources(field, scene, 0.0)
    assert field.current[field.idx(CX, CY)] == pytest.approx(
        entity.wave_source.amplitude
    )
    assert np.count_nonzero(field.current) == 1


def test_square_wave_sign():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_point_source(Vec2.ZERO)
    entity.wave_source.waveform = Waveform.SQUARE
    entity.wave_source.phase = 1.5 * math.pi
    apply_wave_sources(field, scene, 0.0)
    assert field.current[field.idx(CX, CY)] == -entity.wave_source.amplitude


def test_pulse_wave_on_and_off():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_point_source(Vec2.ZERO)
    entity.wave_source.waveform = Waveform.PULSE
    apply_wave_sources(field, scene, 0.0)
    assert field.current[field.idx(CX, CY)] == entity.wave_source.amplitude
    apply_wave_sources(field, scene, 0.5 / entity.wave_source.frequency)
    assert field.current[field.idx(CX, CY)] == 0.0


def test_disabled_source_does_nothing():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_point_source(Vec2.ZERO)
    entity.wave_source.phase = math.pi / 2
    entity.wave_source.enabled = False
    apply_wave_sources(field, scene, 0.0)
    assert np.count_nonzero(field.current) == 0
    assert field.current[field.idx(CX, CY)] == 0.0


def test_line_source_fills_a_row():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_line_source(Vec2.ZERO)
    entity.wave_source.phase = math.pi / 2
    apply_wave_sources(field, scene, 0.0)
    grid = field.current.reshape(H, W)
    assert np.count_nonzero(grid[CY]) == 40
    assert np.count_nonzero(field.current) == 40


def test_phased_array_elements():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_phased_array(Vec2.ZERO)
    entity.wave_source.phase = math.pi / 2
    apply_wave_sources(field, scene, 0.0)
    row = field.current.reshape(H, W)[CY]
    xs = np.flatnonzero(row)
    assert len(xs) == entity.wave_source.array_count
    assert np.all(np.diff(xs) == 8)
    assert len(set(row[xs].tolist())) == len(xs)


def test_source_off_grid_is_ignored():
    field = small_field()
    scene = empty_scene()
    entity = scene.spawn_point_source(Vec2(0.0, 10_000.0))
    entity.wave_source.phase = math.pi / 2
    apply_wave_sources(field, scene, 0.0)
    assert np.count_nonzero(field.current) == 0


# ── propagation ────────────────────────────────────────────────────────────


def test_step_spreads_impulse_symmetrically():
    field = small_field()
    config = RippleTankConfig()
    centre = field.idx(CX, CY)
    field.current[centre] = 1.0
    old = field.current.copy()
    step_wave_field(field, config, 0.1)
    cur = field.current
    assert cur[centre - 1] == pytest.approx(cur[centre + 1])
    assert cur[centre - W] == pytest.approx(cur[centre + W])
    assert cur[centre - 1] == pytest.approx(cur[centre - W])
    assert cur[centre + 1] > 0.0
    assert np.array_equal(field.previous, old)


def test_step_advances_clock_and_keeps_edges_still():
    field = small_field()
    field.current[:] = 1.0
    config = RippleTankConfig(time_scale=0.5)
    step_wave_field(field, config, 0.2)
    assert config.accumulated_time == pytest.approx(0.2 * 0.5)
    grid = field.current.reshape(H, W)
    assert not np.any(grid[0]) and not np.any(grid[-1])
    assert not np.any(grid[:, 0]) and not np.any(grid[:, -1])


def test_step_paused_changes_nothing():
    field = small_field()
    field.current[field.idx(CX, CY)] = 1.0
    before = field.current.copy()
    config = RippleTankConfig(paused=True)
    step_wave_field(field, config, 0.1)
    assert np.array_equal(field.current, before)
    assert config.accumulated_time == 0.0


def test_step_walls_stay_flat():
    field = small_field()
    wall = field.idx(CX + 1, CY)
    field.obstacle_map[wall] = 0.0
    field.current[wall] = 1.0
    field.current[field.idx(CX, CY)] = 1.0
    step_wave_field(field, RippleTankConfig(), 0.1)
    assert field.current[wall] == 0.0


def test_step_clips_heights():
    field = small_field()
    field.current[field.idx(CX, CY)] = 100.0
    step_wave_field(field, RippleTankConfig(), 0.1)
    assert field.current.max() == 5.0
    assert field.current.min() >= -5.0


# ── the running tank ───────────────────────────────────────────────────────


def test_keyboard_shortcuts():
    tank = RippleTank()
    assert tank.handle_key("space")
    assert tank.config.paused
    assert tank.handle_key(" ")
    assert not tank.config.paused
    grid = tank.config.show_grid
    assert tank.handle_key("G")
    assert tank.config.show_grid is not grid
    tank.field.current[5] = 1.0
    assert tank.handle_key("c")
    assert not np.any(tank.field.current)
    assert tank.handle_key("x") is False


def test_select_and_drag_default_source():
    tank = RippleTank()
    found = tank.press(Vec2(5.0, 0.0))
    assert found is not None
    assert tank.ui.selected_entity == found.handle
    assert tank.ui.dragging == found.handle
    tank.drag(Vec2(105.0, 50.0))
    assert found.position == Vec2(100.0, 50.0)
    tank.release()
    tank.drag(Vec2(0.0, 0.0))
    assert found.position == Vec2(100.0, 50.0)
    tank.right_click()
    assert tank.ui.selected_entity is None


def test_locked_object_does_not_move():
    tank = RippleTank()
    found = tank.press(Vec2(0.0, 0.0))
    found.scene_object.locked = True
    tank.drag(Vec2(200.0, 200.0))
    assert found.position == Vec2(0.0, 0.0)


def test_press_on_empty_space_clears_selection():
    tank = RippleTank()
    tank.press(Vec2(0.0, 0.0))
    tank.release()
    assert tank.press(Vec2(300.0, 300.0)) is None
    assert tank.ui.selected_entity is None
    assert tank.ui.dragging is None


def test_press_with_tool_places_object():
    tank = RippleTank()
    tank.ui.selected_tool = ToolType.PROBE
    placed = tank.press(Vec2(10.0, 10.0))
    assert placed.probe is not None
    assert len(tank.scene) == 2


def test_moving_source_wraps():
    tank = RippleTank(scene=empty_scene())
    entity = tank.scene.spawn_moving_source(Vec2(635.0, 0.0))
    tank.update_moving_sources(1.0)
    assert entity.position.x < 0.0
    assert abs(entity.position.x) < 640.0


def test_moving_source_paused():
    tank = RippleTank(scene=empty_scene(), config=RippleTankConfig(paused=True))
    entity = tank.scene.spawn_moving_source(Vec2(10.0, 0.0))
    tank.update_moving_sources(1.0)
    assert entity.position == Vec2(10.0, 0.0)


def test_probes_record_samples():
    tank = RippleTank(scene=empty_scene())
    entity = tank.scene.spawn_probe(Vec2(0.0, 0.0))
    tank.field.current[:] = 0.25
    tank.update_probes()
    tank.update_probes()
    assert entity.probe.history == [0.25, 0.25]


def test_stats_energy_and_fps():
    tank = RippleTank(scene=empty_scene())
    tank.update_stats(0.25)
    assert tank.stats.fps * 0.25 == pytest.approx(1.0)
    assert tank.stats.wave_energy == 0.0
    tank.field.current[7] = 1.0
    tank.update_stats(0.0)
    assert tank.stats.fps == math.inf
    assert tank.stats.wave_energy > 0.0
    assert tank.stats.probe_phase_diff is None


def test_stats_probe_phase():
    tank = RippleTank(scene=empty_scene())
    first = tank.scene.spawn_probe(Vec2(0.0, 0.0))
    second = tank.scene.spawn_probe(Vec2(10.0, 0.0))
    first.probe.history = [0.0] * 11
    second.probe.history = [0.0] * 11
    tank.update_stats(0.1)
    assert tank.stats.probe_phase_diff == 0.0
    first.probe.history = [1.0] * 12
    second.probe.history = [1.0] * 11
    tank.update_stats(0.1)
    assert 0.0 < tank.stats.probe_phase_diff < math.pi / 2


def test_step_makes_waves():
    tank = RippleTank()
    for _ in range(5):
        tank.step(0.05)
    assert np.any(tank.field.current)
    assert tank.config.accumulated_time == pytest.approx(0.25)
    assert tank.stats.simulation_time == tank.config.accumulated_time
    image = tank.render_image()
    assert image.shape == (tank.field.height, tank.field.width, 4)


def test_step_paused_keeps_field_flat():
    tank = RippleTank(config=RippleTankConfig(paused=True))
    tank.scene.entities[0].wave_source.phase = math.pi / 2
    tank.step(0.05)
    assert not np.any(tank.field.current)
    assert tank.config.accumulated_time == 0.0