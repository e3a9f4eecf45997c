"""Complete command-line configuration for one simulator process."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Union

from .sections import CsvSaverConfig, PlayerConfig, ServerConfig

LOG_DIR = "./log"

_PathLike = Union[str, "os.PathLike[str]"]


def _default_server() -> ServerConfig:
    return ServerConfig(
        game_log_dir=LOG_DIR,
        text_log_dir=LOG_DIR,
        keepaway_log_dir=LOG_DIR,
    )


@dataclass
class Config:
    """Server, player and CSV saver options passed to the simulator.

    By default every log directory points at ``LOG_DIR``.
    """

    server: ServerConfig = field(default_factory=_default_server)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    csv_saver: CsvSaverConfig = field(default_factory=CsvSaverConfig)

    def to_args(self) -> List[str]:
        """All set options as arguments: server, then player, then CSV saver."""
        return [
            *self.server.to_args(),
            *self.player.to_args(),
            *self.csv_saver.to_args(),
        ]

    @classmethod
    def default_trainer_on(cls) -> "Config":
        """Default configuration with the trainer enabled in synchronous mode."""
        config = cls()
        config.server.update(coach=True, coach_w_referee=True, synch_mode=True)
        return config

    def with_ports(self, port: int, coach_port: int, olcoach_port: int) -> "Config":
        """Set the player, trainer and online coach ports."""
        self.server.update(port=port, coach_port=coach_port, olcoach_port=olcoach_port)
        return self

    def with_sync(self, sync: bool) -> "Config":
        """Turn synchronous mode on or off."""
        self.server.synch_mode = sync
        return self

    def with_log_dir(self, log_dir: _PathLike) -> "Config":
        """Set the directory of the game log only."""
        self.server.game_log_dir = os.fspath(log_dir)
        return self

    def with_all_log_dir(self, log_dir: _PathLike) -> "Config":
        """Set the game, text and keepaway log directories together."""
        path = os.fspath(log_dir)
        self.server.update(game_log_dir=path, text_log_dir=path, keepaway_log_dir=path)
        return self