# gomokurs

A gomoku game manager. It runs matches between two AI players, referees
their moves on a 20x20 board, keeps turn and match clocks, and tells the
players the result. Players may be local programs that speak the Gomocup
text protocol over standard input and output, or remote programs that use
a compact binary protocol over TCP.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running a match

Describe each player in a YAML file, then start the manager:

```
gomokurs --black-file black.yaml --white-file white.yaml
```

Options:

- `--black-file PATH`, `--white-file PATH`: player configuration files (required).
- `-t`, `--turn-duration SECONDS`: time allowed for one turn (default `30`).
- `-m`, `--match-duration SECONDS`: total time a player may use over the match (default `180`).
- `--log-level LEVEL`: one of `error`, `warn`, `info`, `debug`, `trace`
  (case-insensitive) or a number from `1` to `5` (default `INFO`).

The manager runs in loop mode: when a player makes five in a row, both
players are sent the result and a new game starts straight away. The run
stops when a player's turn or match time runs out; that player loses and
the outcome is logged. `main` returns `0` after a finished run and `1`
when the log level, a configuration file or a player connection is
invalid; bad usage exits with status `2`.

## Player configuration

A local program started as a subprocess (`args` is required, and may be
an empty list):

```yaml
protocol:
  stdio:
    binary: ./my-ai
    args: ["--depth", "4"]
```

Connecting to a player that is already listening:

```yaml
protocol:
  tcp:
    active:
      address: 127.0.0.1:4000
```

Waiting for one player to connect:

```yaml
protocol:
  tcp:
    passive:
      address: 0.0.0.0:4000
```

Addresses are `host:port`; IPv6 hosts go in brackets, as in `[::1]:4000`.
`gomokurs.configuration.load_player_configuration` reads such a file and
raises `ConfigurationError` when it is unreadable or malformed.

## TCP protocol

Every message starts with a one-byte `gomokurs.protocol.ActionID`. A
connecting player first sends `PLAYER_PROTOCOL_VERSION` followed by its
version as a string (big-endian 32-bit length, then UTF-8 bytes, as built
by `gomokurs.protocol.encode_string`). The manager answers
`MANAGER_PROTOCOL_COMPATIBLE` when the version is `0.2.0`
(`PROTOCOL_VERSION`), and otherwise `MANAGER_ERROR` with a message.

## Using the library

The pieces can be used on their own:

- `gomokurs.state.Board` holds a board and detects five in a row.
- `gomokurs.engine.GameEngine` enforces turn order and runs both players'
  `gomokurs.timer.Timer`s.
- `gomokurs.parsers.parse_input` turns one line of the text protocol into
  an action such as `Ready`, `Play` or `Metadata` from `gomokurs.actions`.
- `gomokurs.local_interface.LocalPlayerInterface` and
  `gomokurs.tcp_interface.TcpPlayerInterface` implement
  `gomokurs.ports.PlayerInterface`.
- `gomokurs.player_factory.create_player_interface` builds an interface
  from a `PlayerConfiguration`.
- `gomokurs.coordinator.Coordinator` drives games between two interfaces,
  in `Mode.SINGLE_GAME` or `Mode.LOOP`.

```python
from gomokurs.state import Board, CellStatus, Position

board = Board(Position(20, 20))
for x in range(5):
    board.set_cell(Position(x, 0), CellStatus.BLACK)
assert board.check_win(Position(4, 0))
```

## What it does not do

- It never declares a draw: a full board is not detected.
- It does not send `BOARD`, `INFO` or `ABOUT` during a match, although
  the interfaces can send them.
- A timeout ends the run without sending results or `END` to the players.
- Over TCP, `notify_unknown` and `notify_error` send nothing, and a
  player's metadata message carries no data.
- There is no graphical board and no record of past games.