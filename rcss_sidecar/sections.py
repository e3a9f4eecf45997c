"""Typed option sections rendered as ``namespace::name=value`` arguments.

Every option is optional: only options that were set are passed to the
simulator, in declaration order.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U16_MAX = 2**16 - 1

_KIND = "kind"


def _opt(kind: str) -> Any:
    return field(default=None, metadata={_KIND: kind})


def _str() -> Any:
    return _opt("str")


def _int() -> Any:
    return _opt("int")


def _u16() -> Any:
    return _opt("u16")


def _bool() -> Any:
    return _opt("bool")


def _float() -> Any:
    return _opt("float")


def _coerce(name: str, kind: str, value: Any) -> Any:
    if value is None:
        return None
    if kind == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"{name} expects a bool, got {value!r}")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise TypeError(f"{name} expects a str, got {value!r}")
        return value
    if kind in ("int", "u16"):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} expects an int, got {value!r}")
        low, high = (0, _U16_MAX) if kind == "u16" else (_I32_MIN, _I32_MAX)
        if not low <= value <= high:
            raise ValueError(f"{name} must be within [{low}, {high}], got {value}")
        return value
    if kind == "float":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name} expects a number, got {value!r}")
        return float(value)
    raise TypeError(f"unknown option kind {kind!r} for {name}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


_KINDS_CACHE: Dict[type, Dict[str, str]] = {}


class ConfigSection:
    """Base for a set of optional options sharing one namespace."""

    NAMESPACE: ClassVar[str] = ""

    @classmethod
    def _kinds(cls) -> Dict[str, str]:
        kinds = _KINDS_CACHE.get(cls)
        if kinds is None:
            kinds = {f.name: f.metadata[_KIND] for f in dataclasses.fields(cls)}
            _KINDS_CACHE[cls] = kinds
        return kinds

    def __setattr__(self, name: str, value: Any) -> None:
        kind = self._kinds().get(name)
        if kind is None:
            raise AttributeError(
                f"{type(self).__name__} has no option named {name!r}"
            )
        object.__setattr__(self, name, _coerce(name, kind, value))

    def update(self, **kwargs: Any) -> "ConfigSection":
        """Set several options at once and return the section itself."""
        kinds = self._kinds()
        unknown = [name for name in kwargs if name not in kinds]
        if unknown:
            raise TypeError(
                f"{type(self).__name__} has no option(s): {', '.join(unknown)}"
            )
        for name, value in kwargs.items():
            setattr(self, name, value)
        return self

    def to_args(self) -> List[str]:
        """Render every option that is set as ``namespace::name=value``."""
        return [
            f"{self.NAMESPACE}::{f.name}={_format(value)}"
            for f in dataclasses.fields(self)
            if (value := getattr(self, f.name)) is not None
        ]


@dataclass
class CsvSaverConfig(ConfigSection):
    """Options of the CSV result saver."""

    NAMESPACE: ClassVar[str] = "CSVSaver"

    version: Optional[str] = _str()
    save: Optional[bool] = _bool()
    filename: Optional[str] = _str()


@dataclass
class PlayerConfig(ConfigSection):
    """Options of the heterogeneous player types."""

    NAMESPACE: ClassVar[str] = "player"

    version: Optional[str] = _str()
    player_types: Optional[int] = _int()
    pt_max: Optional[int] = _int()
    random_seed: Optional[int] = _int()
    subs_max: Optional[int] = _int()
    allow_mult_default_type: Optional[bool] = _bool()
    catchable_area_l_stretch_max: Optional[float] = _float()
    catchable_area_l_stretch_min: Optional[float] = _float()
    dash_power_rate_delta_max: Optional[float] = _float()
    dash_power_rate_delta_min: Optional[float] = _float()
    effort_max_delta_factor: Optional[float] = _float()
    effort_min_delta_factor: Optional[float] = _float()
    extra_stamina_delta_max: Optional[float] = _float()
    extra_stamina_delta_min: Optional[float] = _float()
    foul_detect_probability_delta_factor: Optional[float] = _float()
    inertia_moment_delta_factor: Optional[float] = _float()
    kick_power_rate_delta_max: Optional[float] = _float()
    kick_power_rate_delta_min: Optional[float] = _float()
    kick_rand_delta_factor: Optional[float] = _float()
    kickable_margin_delta_max: Optional[float] = _float()
    kickable_margin_delta_min: Optional[float] = _float()
    new_dash_power_rate_delta_max: Optional[float] = _float()
    new_dash_power_rate_delta_min: Optional[float] = _float()
    new_stamina_inc_max_delta_factor: Optional[float] = _float()
    player_decay_delta_max: Optional[float] = _float()
    player_decay_delta_min: Optional[float] = _float()
    player_size_delta_factor: Optional[float] = _float()
    player_speed_max_delta_max: Optional[float] = _float()
    player_speed_max_delta_min: Optional[float] = _float()
    stamina_inc_max_delta_factor: Optional[float] = _float()


@dataclass
class ServerConfig(ConfigSection):
    """Options of the simulator itself."""

    NAMESPACE: ClassVar[str] = "server"

    version: Optional[str] = _str()
    catch_ban_cycle: Optional[int] = _int()
    clang_advice_win: Optional[int] = _int()
    clang_define_win: Optional[int] = _int()
    clang_del_win: Optional[int] = _int()
    clang_info_win: Optional[int] = _int()
    clang_mess_delay: Optional[int] = _int()
    clang_mess_per_cycle: Optional[int] = _int()
    clang_meta_win: Optional[int] = _int()
    clang_rule_win: Optional[int] = _int()
    clang_win_size: Optional[int] = _int()
    coach_port: Optional[int] = _u16()
    connect_wait: Optional[int] = _int()
    drop_ball_time: Optional[int] = _int()
    extra_half_time: Optional[int] = _int()
    foul_cycles: Optional[int] = _int()
    freeform_send_period: Optional[int] = _int()
    freeform_wait_period: Optional[int] = _int()
    game_log_compression: Optional[int] = _int()
    game_log_version: Optional[int] = _int()
    game_over_wait: Optional[int] = _int()
    goalie_max_moves: Optional[int] = _int()
    half_time: Optional[int] = _int()
    hear_decay: Optional[int] = _int()
    hear_inc: Optional[int] = _int()
    hear_max: Optional[int] = _int()
    illegal_defense_duration: Optional[int] = _int()
    illegal_defense_number: Optional[int] = _int()
    keepaway_start: Optional[int] = _int()
    kick_off_wait: Optional[int] = _int()
    max_goal_kicks: Optional[int] = _int()
    max_monitors: Optional[int] = _int()
    nr_extra_halfs: Optional[int] = _int()
    nr_normal_halfs: Optional[int] = _int()
    olcoach_port: Optional[int] = _u16()
    pen_before_setup_wait: Optional[int] = _int()
    pen_max_extra_kicks: Optional[int] = _int()
    pen_nr_kicks: Optional[int] = _int()
    pen_ready_wait: Optional[int] = _int()
    pen_setup_wait: Optional[int] = _int()
    pen_taken_wait: Optional[int] = _int()
    point_to_ban: Optional[int] = _int()
    point_to_duration: Optional[int] = _int()
    port: Optional[int] = _u16()
    recv_step: Optional[int] = _int()
    say_coach_cnt_max: Optional[int] = _int()
    say_coach_msg_size: Optional[int] = _int()
    say_msg_size: Optional[int] = _int()
    send_step: Optional[int] = _int()
    send_vi_step: Optional[int] = _int()
    sense_body_step: Optional[int] = _int()
    simulator_step: Optional[int] = _int()
    slow_down_factor: Optional[int] = _int()
    start_goal_l: Optional[int] = _int()
    start_goal_r: Optional[int] = _int()
    synch_micro_sleep: Optional[int] = _int()
    synch_offset: Optional[int] = _int()
    synch_see_offset: Optional[int] = _int()
    tackle_cycles: Optional[int] = _int()
    text_log_compression: Optional[int] = _int()
    auto_mode: Optional[bool] = _bool()
    back_passes: Optional[bool] = _bool()
    coach: Optional[bool] = _bool()
    coach_w_referee: Optional[bool] = _bool()
    forbid_kick_off_offside: Optional[bool] = _bool()
    free_kick_faults: Optional[bool] = _bool()
    fullstate_l: Optional[bool] = _bool()
    fullstate_r: Optional[bool] = _bool()
    game_log_dated: Optional[bool] = _bool()
    game_log_fixed: Optional[bool] = _bool()
    game_logging: Optional[bool] = _bool()
    golden_goal: Optional[bool] = _bool()
    keepaway: Optional[bool] = _bool()
    keepaway_log_dated: Optional[bool] = _bool()
    keepaway_log_fixed: Optional[bool] = _bool()
    keepaway_logging: Optional[bool] = _bool()
    log_times: Optional[bool] = _bool()
    old_coach_hear: Optional[bool] = _bool()
    pen_allow_mult_kicks: Optional[bool] = _bool()
    pen_coach_moves_players: Optional[bool] = _bool()
    pen_random_winner: Optional[bool] = _bool()
    penalty_shoot_outs: Optional[bool] = _bool()
    profile: Optional[bool] = _bool()
    proper_goal_kicks: Optional[bool] = _bool()
    record_messages: Optional[bool] = _bool()
    send_comms: Optional[bool] = _bool()
    synch_mode: Optional[bool] = _bool()
    team_actuator_noise: Optional[bool] = _bool()
    text_log_dated: Optional[bool] = _bool()
    text_log_fixed: Optional[bool] = _bool()
    text_logging: Optional[bool] = _bool()
    use_offside: Optional[bool] = _bool()
    verbose: Optional[bool] = _bool()
    wind_none: Optional[bool] = _bool()
    wind_random: Optional[bool] = _bool()
    audio_cut_dist: Optional[float] = _float()
    back_dash_rate: Optional[float] = _float()
    ball_accel_max: Optional[float] = _float()
    ball_decay: Optional[float] = _float()
    ball_rand: Optional[float] = _float()
    ball_size: Optional[float] = _float()
    ball_speed_max: Optional[float] = _float()
    ball_stuck_area: Optional[float] = _float()
    ball_weight: Optional[float] = _float()
    catch_probability: Optional[float] = _float()
    catchable_area_l: Optional[float] = _float()
    catchable_area_w: Optional[float] = _float()
    ckick_margin: Optional[float] = _float()
    control_radius: Optional[float] = _float()
    dash_angle_step: Optional[float] = _float()
    dash_power_rate: Optional[float] = _float()
    dist_noise_rate: Optional[float] = _float()
    effort_dec: Optional[float] = _float()
    effort_dec_thr: Optional[float] = _float()
    effort_inc: Optional[float] = _float()
    effort_inc_thr: Optional[float] = _float()
    effort_init: Optional[float] = _float()
    effort_min: Optional[float] = _float()
    extra_stamina: Optional[float] = _float()
    focus_dist_noise_rate: Optional[float] = _float()
    foul_detect_probability: Optional[float] = _float()
    foul_exponent: Optional[float] = _float()
    goal_width: Optional[float] = _float()
    illegal_defense_dist_x: Optional[float] = _float()
    illegal_defense_width: Optional[float] = _float()
    inertia_moment: Optional[float] = _float()
    keepaway_length: Optional[float] = _float()
    keepaway_width: Optional[float] = _float()
    kick_power_rate: Optional[float] = _float()
    kick_rand: Optional[float] = _float()
    kick_rand_factor_l: Optional[float] = _float()
    kick_rand_factor_r: Optional[float] = _float()
    kickable_margin: Optional[float] = _float()
    land_dist_noise_rate: Optional[float] = _float()
    land_focus_dist_noise_rate: Optional[float] = _float()
    max_back_tackle_power: Optional[float] = _float()
    max_catch_angle: Optional[float] = _float()
    max_dash_angle: Optional[float] = _float()
    max_dash_power: Optional[float] = _float()
    max_tackle_power: Optional[float] = _float()
    maxmoment: Optional[float] = _float()
    maxneckang: Optional[float] = _float()
    maxneckmoment: Optional[float] = _float()
    maxpower: Optional[float] = _float()
    min_catch_angle: Optional[float] = _float()
    min_dash_angle: Optional[float] = _float()
    min_dash_power: Optional[float] = _float()
    minmoment: Optional[float] = _float()
    minneckang: Optional[float] = _float()
    minneckmoment: Optional[float] = _float()
    minpower: Optional[float] = _float()
    offside_active_area_size: Optional[float] = _float()
    offside_kick_margin: Optional[float] = _float()
    pen_dist_x: Optional[float] = _float()
    pen_max_goalie_dist_x: Optional[float] = _float()
    player_accel_max: Optional[float] = _float()
    player_decay: Optional[float] = _float()
    player_rand: Optional[float] = _float()
    player_size: Optional[float] = _float()
    player_speed_max: Optional[float] = _float()
    player_speed_max_min: Optional[float] = _float()
    player_weight: Optional[float] = _float()
    prand_factor_l: Optional[float] = _float()
    prand_factor_r: Optional[float] = _float()
    quantize_step: Optional[float] = _float()
    quantize_step_l: Optional[float] = _float()
    recover_dec: Optional[float] = _float()
    recover_dec_thr: Optional[float] = _float()
    recover_init: Optional[float] = _float()
    recover_min: Optional[float] = _float()
    red_card_probability: Optional[float] = _float()
    side_dash_rate: Optional[float] = _float()
    slowness_on_top_for_left_team: Optional[float] = _float()
    slowness_on_top_for_right_team: Optional[float] = _float()
    stamina_capacity: Optional[float] = _float()
    stamina_inc_max: Optional[float] = _float()
    stamina_max: Optional[float] = _float()
    stopped_ball_vel: Optional[float] = _float()
    tackle_back_dist: Optional[float] = _float()
    tackle_dist: Optional[float] = _float()
    tackle_exponent: Optional[float] = _float()
    tackle_power_rate: Optional[float] = _float()
    tackle_rand_factor: Optional[float] = _float()
    tackle_width: Optional[float] = _float()
    visible_angle: Optional[float] = _float()
    visible_distance: Optional[float] = _float()
    wind_ang: Optional[float] = _float()
    wind_dir: Optional[float] = _float()
    wind_force: Optional[float] = _float()
    wind_rand: Optional[float] = _float()
    coach_msg_file: Optional[str] = _str()
    fixed_teamname_l: Optional[str] = _str()
    fixed_teamname_r: Optional[str] = _str()
    game_log_dir: Optional[str] = _str()
    game_log_fixed_name: Optional[str] = _str()
    keepaway_log_dir: Optional[str] = _str()
    keepaway_log_fixed_name: Optional[str] = _str()
    landmark_file: Optional[str] = _str()
    log_date_format: Optional[str] = _str()
    team_l_start: Optional[str] = _str()
    team_r_start: Optional[str] = _str()
    text_log_dir: Optional[str] = _str()
    text_log_fixed_name: Optional[str] = _str()