# gopractice

A collection of small, self-contained programs, each a compact example
of a common task: sorting integers, a command-line calculator, a music
library with a console front end, a chat-style game server that talks
over an in-process message channel, ICMP echo and raw HTTP `HEAD`
requests, MD5/SHA-1 hashing, listing primes, a TLS echo server and
client, and a small photo upload site built on Flask.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command                 | What it does                                                           |
|-------------------------|------------------------------------------------------------------------|
| `gopractice-sorter`     | Reads one integer per line, sorts them, writes them one per line       |
| `gopractice-calc`       | Adds two integers or takes an integer square root                      |
| `gopractice-mplayer`    | Interactive music library and simulated player                         |
| `gopractice-cgss`       | Interactive game server console: log in, log out, chat, list players   |
| `gopractice-icmp`       | Sends one ICMP echo request to a host and checks the reply             |
| `gopractice-simplehttp` | Sends `HEAD / HTTP/1.0` to `host:port` and prints the raw response     |
| `gopractice-hash`       | Prints MD5 and SHA-1 digests of files (or of a sample string)          |
| `gopractice-primes`     | Prints the primes up to a goal (default 100)                           |
| `gopractice-echo`       | TLS echo server (`server`) and one-shot client (`client`)              |
| `gopractice-photoweb`   | Serves the photo upload, list and view site                            |

Examples:

```
gopractice-sorter -i numbers.txt -o sorted.txt -a bubblesort
gopractice-calc add 1 2
gopractice-calc sqrt 16
gopractice-simplehttp example.com:80
gopractice-hash notes.txt
gopractice-primes 50
gopractice-echo server --address :8000 --cert cert.pem --key key.pem
gopractice-echo client --address 127.0.0.1:8000 --message "Hello"
gopractice-photoweb --port 9080 --uploads ./uploads --views ./views --public ./public
```

Notes on the commands:

- `gopractice-sorter` takes `-i` (default `infile`), `-o` (default
  `outfile`) and `-a`, which is `qsort` (default) or `bubblesort`. With
  any other algorithm name it says so and writes the values unsorted.
- `gopractice-mplayer` understands `lib list`, `lib add <name> <artist>
  <source> <type>`, `lib remove <index>`, `play <name>`, and `q` or `e`
  to quit. Only the types `MP3` and `WAV` can be played; playing just
  prints progress dots.
- `gopractice-cgss` understands `login <name> <level> <exp>`,
  `logout <name>`, `send <message>`, `listplayer`, `help` (or `H`) and
  `quit` (or `q`). Broadcast messages are printed by each logged-in
  player.
- `gopractice-icmp` opens a raw socket, which usually needs
  administrator rights.
- `gopractice-echo server` defaults to `--address :8000`; the client
  defaults to `127.0.0.1:8000` and the message `Hello\n`, and does not
  verify the server's certificate. Both log through `logging`.

## Library use

```python
from gopractice import sorting, simplemath, hashing, icmp, primes
from gopractice.mlib import MusicEntry, MusicManager

values = [5, 4, 3, 2, 1]
sorting.quick_sort(values)      # sorts in place: [1, 2, 3, 4, 5]
sorting.bubble_sort(values)

simplemath.add(1, 2)            # 3
simplemath.sqrt(16)             # 4; ValueError for negative input

hashing.md5_hex(b"Hi,Pandaman!")   # 'd2372917b4fc4a5776124511cff870b6'
hashing.sha1_hex(b"Hi,Pandaman!")  # 'a2d861600e5b87946f8849f3d14d72426812856a'
hashing.hash_file("notes.txt")     # FileDigests(md5=..., sha1=...)

packet = icmp.build_echo_request(13, 37, b"c")
icmp.checksum(packet)           # 0 once the checksum field is filled in

list(primes.primes(20))         # [2, 3, 5, 7, 11, 13, 17, 19]

library = MusicManager()
library.add(MusicEntry("1", "My Heart Will Go On", "Celine Dion", "song.mp3", "MP3"))
len(library)                    # 1
library.find("My Heart Will Go On")
library.get(0)                  # IndexError when out of range
library.remove(0)               # None when out of range
```

Other pieces:

- `gopractice.players`: `MP3Player`, `WAVPlayer` and `play(source,
  mtype)`, which raises `ValueError` for an unsupported type.
- `gopractice.ipc`: `IpcServer`, `IpcClient` (`call`, `close`, usable
  as a context manager), `Request`, `Response` and the abstract
  `Server`.
- `gopractice.cg`: `CenterServer`, `CenterClient` (`add_player`,
  `remove_player`, `list_players`, `broadcast`, raising `CenterError`
  on failure), `Player`, `Message`, `Room`.
- `gopractice.simplehttp`: `head_request("host:port")` returns the raw
  reply bytes.
- `gopractice.echo`: `serve(address, certfile, keyfile)`,
  `echo_once(address, message)` and `handle_client(conn)`.
- `gopractice.photoweb`: `create_app(upload_dir, template_dir,
  static_dir)` returns a Flask application with the routes `/`, `/list`,
  `/view?id=<name>`, `/upload` (GET form, POST with an `image` file
  field) and `/assets/<path>`.

## What is not included

- The photo site ships no page templates. `create_app` loads every
  `.html` file in the template directory; `list.html` (given `images`)
  and `upload.html` must be supplied, and the upload directory must
  already exist.
- No TLS certificate or key is shipped; the echo server needs a PEM
  certificate and key supplied by you.
- The music player does not produce sound; it only simulates playback.
- The game server keeps players in memory only; nothing is stored.