# hubbmnet

A command-driven simulator of a small network of clients. Every client has an
ID, an IP address, a MAC address and a routing table. Messages are cut into
frames. Each frame is a stack of four packets: application, transport,
network and physical. Frames go from hop to hop until they reach their
destination or are dropped, and every client keeps a log of what it sent,
forwarded, received or dropped. A report of everything that happens is
written as text.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running a simulation

```
hubbmnet CLIENTS_FILE ROUTING_FILE COMMANDS_FILE MESSAGE_LIMIT SENDER_PORT RECEIVER_PORT
```

- `CLIENTS_FILE` begins with the number of clients. Each of the following
  lines holds `ID IP MAC`.
- `ROUTING_FILE` holds one block per client, in the same order as the clients
  file. Blocks are separated by a line holding only `-`. Each line in a block
  is `RECEIVER_ID NEXT_HOP_ID`.
- `COMMANDS_FILE` begins with the number of commands. Each of the following
  lines holds one command.
- `MESSAGE_LIMIT` is the most characters one frame can carry (at least 1).
- `SENDER_PORT` and `RECEIVER_PORT` are written into every transport-layer
  packet.

The report goes to standard output. If a file cannot be read, a count is
missing or wrong, a command names an unknown client, or a sender has no route
to the receiver, the command prints `hubbmnet: error: ...` on standard error
and exits with status 1.

### Example input

`clients.dat`:

```
3
A 10.0.0.1 MAC-A
B 10.0.0.2 MAC-B
C 10.0.0.3 MAC-C
```

`routing.dat` (A reaches C through B):

```
B B
C B
-
A A
C C
-
A B
B B
```

`commands.dat`:

```
4
MESSAGE A C #Hello there#
SEND
RECEIVE
PRINT_LOG A
```

### Commands

| Command | Effect |
| --- | --- |
| `MESSAGE <sender> <receiver> #<text>#` | Splits the text into frames and queues them on the sender's outgoing queue, then lists them |
| `SHOW_FRAME_INFO <client> out\|in <n>` | Prints frame `n` (counted from 1) of the outgoing queue for `out`, of the incoming queue otherwise; `No such frame.` if there is none |
| `SHOW_Q_INFO <client> out\|in` | Prints how many frames the outgoing (`out`) or incoming queue holds |
| `SEND` | Moves every outgoing frame to the incoming queue of the client whose MAC address it is addressed to |
| `RECEIVE` | Each client accepts the frames meant for it, forwards the others along its routing table, or drops them when the next hop is unknown |
| `PRINT_LOG <client>` | Prints the client's activity log |

Each command is echoed between two rules before it runs. Anything else prints
`Invalid command.`

Log entries record the activity, the number of frames and hops, the sender
and receiver IDs, whether it succeeded and the whole message. Every entry
carries the same fixed timestamp, `2023-11-22 20:30:03`.

## Using it from Python

```python
import io

from hubbmnet.loader import read_clients, read_routing_tables, read_commands
from hubbmnet.network import Network

clients = read_clients("clients.dat")
read_routing_tables(clients, "routing.dat")
commands = read_commands("commands.dat")

report = io.StringIO()
Network(out=report).process_commands(clients, commands, 20, "0706", "0607")
print(report.getvalue())
```

- `hubbmnet.loader`: `parse_client`, `read_clients`, `read_routing_tables`,
  `read_commands`.
- `hubbmnet.network`: `Network`, whose methods `execute`, `message`,
  `show_frame_info`, `show_queue_info`, `send`, `receive` and `print_log`
  run single commands; and `split_message(message, limit)`, which cuts a
  message into chunks of at most `limit` characters.
- `hubbmnet.client`: `Client`, holding the routing table, the incoming and
  outgoing queues of frames and the log entries.
- `hubbmnet.packets`: `Packet` and its four layer packets, and `Frame`.
- `hubbmnet.activity_log`: `ActivityType` and `LogEntry`.

`Network` writes to standard output unless a text stream is passed as `out`.

## What it does not do

Nothing goes over a real network: clients, addresses, ports and links exist
only in memory, and frames travel only when `SEND` and `RECEIVE` are run.
Timestamps are not taken from a clock.