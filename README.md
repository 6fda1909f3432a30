# acciping

Building blocks for a terminal latency monitor: data types for ping
outcomes, a terminal that can be drawn to and that dispatches key presses,
ANSI escape sequences, glyphs, and a handful of small utilities. It has no
dependencies outside the standard library.

## What is inside

- `acciping.ping.results` holds the ping data types:
  - `PingDataPoint`: a round trip time (`duration`), when it was sent
    (`timestamp`) and a `drop_reason`, with `dropped()` and `good()`.
  - `PingResults`: a data point with the address it came from (`ip`) or an
    `internal_error`.
  - `Dropped`: the reasons a packet can be dropped (`NOT_DROPPED`,
    `TIMEOUT`, `DNS_FAILURE`, `BAD_RESPONSE`, `TEST_DROP`).
  - `DNSCacheTrust`: `LOW_TRUST`, `NOMINAL_TRUST` and `HIGH_TRUST`, each with
    `max_dropped()` giving 0, 1 or 5.
  - `pings_per_minute_to_duration`: the gap between pings for a rate.
- `acciping.terminal` holds `Terminal`, `Size`, `parse_size`, `Listener` and
  `UserCancelled`. `Terminal.start_raw` puts the terminal into raw mode and
  sends each input character to the listeners; a ctrl+c listener is always
  added, which restores the terminal and calls `stop` with `UserCancelled`.
  `Terminal.for_testing` builds one over stub byte streams.
- `acciping.ansi` builds escape sequences for cursor movement, erasing and
  colour. `acciping.typography` holds box-drawing and symbol glyphs.
- `acciping.spinner.spinner` returns the activity glyph for a frame, placed
  in the top right corner and advancing about every 200ms.
- `acciping.zorder` has the `Layer` enum and `paint_order()`, the order in
  which graph layers are painted from back to front.
- Small utilities:
  - `acciping.numeric`: significant-figure rounding and normalisation.
  - `acciping.timeutils`: `format_duration`, `human_string` and
    `time_date_format`.
  - `acciping.errors`: `WrappedError`, `wrap` and `wrapf` for errors with a
    cause.
  - `acciping.byteutils`: `clear` and `hex_print`.
  - `acciping.sliceutils`: `one_of`, `all_of`, `fold`, `shuffled`, `join`.
  - `acciping.siphon`: `tee` copies every value of a queue into two queues
    until an event is set.
  - `acciping.env`: `should_test_network` and `local_frame_diffs` read
    `SHOULD_TEST_NETWORK` and `LOCAL_FRAME_DIFFS`, true when set to `1`.

## Examples

Durations are given in nanoseconds and truncated to significant figures:

```python
from acciping.timeutils import human_string

human_string(123456, 3)      # "123µs"
human_string(129379939, 4)   # "129.3ms"
```

Describe a ping:

```python
from datetime import datetime, timedelta, timezone
from acciping.ping.results import Dropped, PingDataPoint, pings_per_minute_to_duration

point = PingDataPoint(
    duration=timedelta(milliseconds=12),
    timestamp=datetime(2024, 8, 2, 20, 40, 41, tzinfo=timezone.utc),
)
str(point)                          # "2024-08-02T20:40:41Z | 12ms"
str(Dropped.TIMEOUT)                # "Timeout"
pings_per_minute_to_duration(60)    # timedelta(seconds=1)
```

Parse a terminal size written as `<H>x<W>`:

```python
from acciping.terminal import parse_size

size = parse_size("40x80")   # Size(height=40, width=80)
```

Build ANSI sequences:

```python
from acciping import ansi

ansi.cursor_position(1, 1)   # "\x1b[H"
ansi.cyan("ok")              # "\x1b[96mok\x1b[0m"
```

Rescale a value from one range into another:

```python
from acciping.numeric import normalize_to_range

normalize_to_range(5.0, 0.0, 10.0, 0.0, 100.0)   # 50.0
```

## What it does not do

The package does not send pings and does not resolve host names: there is
no ICMP socket, no DNS lookup and no address cache. `acciping.ping.results`
only describes outcomes that some other code measured. It also does not draw
the latency graph itself and has no command to run; it supplies the pieces
(terminal, escape sequences, glyphs, spinner, layer order) such a screen is
built from.

## Tests

The tests use pytest, listed under the `test` extra:

```
pip install -e .[test]
pytest
```