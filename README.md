# rcss_sidecar

This package holds the building blocks of a sidecar that runs next to a
RoboCup soccer simulator server (`rcssserver`). It can do three things:

- build the server's command-line configuration,
- follow the state of a match from the game timestep,
- match the server's text replies to the commands waiting for them.

It uses only the standard library and needs Python 3.10 or later.

## Modules

### `rcss_sidecar.sections`

`ServerConfig`, `PlayerConfig` and `CsvSaverConfig` are dataclasses. Each one holds the options of one namespace: `server`, `player` and `CSVSaver`.

**Default values.** Every option starts as `None`, which means unset.

**Checks on assignment.** Each assignment is checked:

- Booleans and strings must have exactly that type.
- Integer options must fit in a signed 32-bit range.
- Port options must fit in 0–65535.
- Floats accept any number.

A wrong type raises `TypeError` and an out-of-range integer raises `ValueError`. Assigning to an unknown option raises `AttributeError`.

**`update(**options)`** sets several options at once and returns the section. It raises `TypeError` for unknown option names.

**`to_args()`** renders the options that are set, in declaration order, as `namespace::option=value`. The values are written like this:

- Booleans are written `true` / `false`.
- Whole floats lose their decimal point, so `1.0` becomes `1`.
- Other floats are written in plain decimal notation.

```python
from rcss_sidecar.sections import ServerConfig

server = ServerConfig(port=6000)
server.update(synch_mode=True, ball_decay=0.94)
print(server.to_args())
# ['server::port=6000', 'server::synch_mode=true', 'server::ball_decay=0.94']
```

### `rcss_sidecar.config`

`Config` combines one section of each kind. By default the game, text and keepaway log directories all point at `LOG_DIR` (`./log`).

- `to_args()` lists the server options, then the player options, then the CSV saver options.
- `Config.default_trainer_on()` additionally enables `coach`, `coach_w_referee` and `synch_mode`.
- `with_ports(port, coach_port, olcoach_port)`, `with_sync(sync)`, `with_log_dir(log_dir)` and `with_all_log_dir(log_dir)` change the options they name and return the config. The log directory can be given as a string or a path.

```python
from rcss_sidecar.config import Config

config = Config.default_trainer_on().with_ports(6000, 6001, 6002)
args = config.to_args()
```

### `rcss_sidecar.status`

**`ProcessState` and `ProcessStatus`.** `ProcessState` enumerates a simulator process's life cycle: `INIT`, `BOOTING`, `RUNNING`, `RETURNED` and `DEAD`. `ProcessStatus` pairs a state with a return code or an error message. Its methods are:

- `is_ready()`
- `is_finished()`: true for a non-zero return or a dead process.
- `ord()`

**`SidecarStatus`** is the state of the match: `UNINITIALIZED`, `IDLE`, `SIMULATING` or `FINISHED`.

**`next_sidecar_status(current, timestep)`** gives the status that a reported timestep leads to, or `None` when nothing changes. The match is finished at `GAME_END_TIMESTEP` (6000).

**`SidecarStatusTracker`** holds a status behind a lock:

- `update(timestep)` applies one timestep.
- `close()` marks the match finished.
- `await track(timesteps)` follows an async stream of timesteps and finishes when the stream ends.

### `rcss_sidecar.resolver`

**Commands and kinds.** A command is any object with a hashable `kind` and an `encode()` method that returns its wire text. A kind provides two parsers:

- `parse_ret_ok(rest)` returns a value, or `None` to ignore the reply.
- `parse_ret_err(rest)` returns an exception, or `None`.

**Parsing replies.** `split_reply(raw_msg)` splits a `(...)` reply into tokens. It reads `(init ok)` as `(ok init)`.

**`CallResolver(decode)`** looks kinds up by wire name with `decode`. It delivers each reply to the oldest caller waiting on that kind:

- An `(ok <name> ...)` reply completes that caller with the parsed value.
- An `(error ...)` reply fails the first pending kind whose error parser recognises it.

Its methods are:

- `dispatch(raw_msg)` handles one message.
- `await run(queue)` dispatches messages from an `asyncio.Queue` until it receives `None`.
- `close()` stops it and fails every waiting call with `ConnectionAbortedError`.

**`CallSender`** is created with `resolver.sender(send)`. `send` may be a plain function or a coroutine function.

- `await send(command)` waits for the reply without a limit.
- `await call(command, timeout=2.0)` raises `CommandTimeoutError` when no reply arrives in time.

**`Addon`** is the base for objects that are closed together with a client connection.

```python
import asyncio

from rcss_sidecar.resolver import CallResolver


class CheckBallKind:
    def parse_ret_ok(self, rest):
        return int(rest[0]) if rest else None

    def parse_ret_err(self, rest):
        return None


CHECK_BALL = CheckBallKind()


class CheckBall:
    kind = CHECK_BALL

    def encode(self):
        return "(check_ball)"


async def main():
    resolver = CallResolver(lambda name: CHECK_BALL if name == "check_ball" else None)
    sent = []
    caller = resolver.sender(sent.append)
    pending = asyncio.create_task(caller.send(CheckBall()))
    await asyncio.sleep(0)
    resolver.dispatch("(ok check_ball 120 (b) 0 0 0 0)")
    print(await pending, sent)  # 120 ['(check_ball)']


asyncio.run(main())
```

## What it does not do

The package covers only the pieces listed above. It does not:

- start, supervise or stop a simulator process;
- open the UDP connection to the server;
- define the concrete trainer commands;
- serve an HTTP or WebSocket interface.

`Config.to_args()` gives the arguments for starting the server. Wiring a connection to `CallResolver.run` and `CallResolver.sender` is up to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```