import pytest

from rcss_sidecar.sections import CsvSaverConfig, PlayerConfig, ServerConfig


@pytest.mark.parametrize("cls", [ServerConfig, PlayerConfig, CsvSaverConfig])
def test_empty_section_renders_no_args(cls):
    assert cls().to_args() == []


def test_port_is_rendered_with_namespace():
    cfg = ServerConfig().update(port=6000)
    assert cfg.to_args() == ["server::port=6000"]


def test_bool_rendered_lowercase():
    cfg = ServerConfig().update(coach=True, synch_mode=False)
    args = cfg.to_args()
    assert "server::coach=true" in args
    assert any(a.endswith("synch_mode=false") for a in args)


def test_csv_saver_namespace():
    cfg = CsvSaverConfig(filename="rcssserver.csv")
    assert cfg.to_args() == ["CSVSaver::filename=rcssserver.csv"]


def test_args_follow_declaration_order_not_assignment_order():
    cfg = ServerConfig()
    cfg.update(olcoach_port=6002, port=6000, coach_port=6001)
    names = [a.split("=")[0] for a in cfg.to_args()]
    assert names == ["server::coach_port", "server::olcoach_port", "server::port"]


def test_update_returns_same_section():
    cfg = PlayerConfig()
    assert cfg.update(player_types=18) is cfg
    assert cfg.player_types == 18


def test_integral_float_has_no_fraction():
    cfg = PlayerConfig(catchable_area_l_stretch_min=1)
    assert cfg.to_args() == ["player::catchable_area_l_stretch_min=1"]
    assert isinstance(cfg.catchable_area_l_stretch_min, float)


@pytest.mark.parametrize("value", [0.94, 0.0125, 14.02, -0.0012])
def test_float_value_round_trips_through_arg(value):
    arg = ServerConfig(ball_decay=value).to_args()[0]
    prefix, text = arg.split("=")
    assert prefix == "server::ball_decay"
    assert float(text) == value
    assert "e" not in text


def test_tiny_float_rendered_without_exponent():
    arg = ServerConfig(wind_rand=1e-5).to_args()[0]
    assert arg.split("=")[1] == "0.00001"


def test_string_value_kept_verbatim():
    fmt = "%Y%m%d%H%M%S-"
    cfg = ServerConfig(log_date_format=fmt)
    assert cfg.to_args() == [f"server::log_date_format={fmt}"]


def test_clearing_option_removes_arg():
    cfg = ServerConfig(port=6000, coach=True)
    cfg.port = None
    assert len(cfg.to_args()) == 1
    assert cfg.to_args()[0].startswith("server::coach=")


def test_every_arg_carries_namespace():
    cfg = PlayerConfig(version="19.0.0", pt_max=1, random_seed=-1, player_decay_delta_min=-0.1)
    args = cfg.to_args()
    assert len(args) == 4
    assert all(a.startswith("player::") for a in args)
    assert "player::random_seed=-1" in args


def test_unknown_option_in_update_raises():
    with pytest.raises(TypeError):
        ServerConfig().update(no_such_option=1)


def test_unknown_attribute_assignment_raises():
    cfg = CsvSaverConfig(save=True)
    with pytest.raises(AttributeError):
        cfg.not_an_option = True
    assert cfg.to_args() == ["CSVSaver::save=true"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"coach": "yes"},
        {"port": True},
        {"port": 6000.0},
        {"version": 19},
        {"ball_decay": "0.94"},
        {"half_time": 1.5},
    ],
)
def test_wrong_types_rejected(kwargs):
    with pytest.raises(TypeError):
        ServerConfig().update(**kwargs)


@pytest.mark.parametrize("port", [-1, 65536])
def test_port_out_of_range_rejected(port):
    with pytest.raises(ValueError):
        ServerConfig(port=port)


def test_int_out_of_i32_range_rejected():
    with pytest.raises(ValueError):
        PlayerConfig(player_types=2**31)


def test_equal_sections_render_equal_args():
    a = ServerConfig(port=6000, coach=True)
    b = ServerConfig().update(coach=True, port=6000)
    assert a == b
    assert a.to_args() == b.to_args()