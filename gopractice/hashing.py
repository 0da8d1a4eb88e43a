"""MD5 and SHA-1 digests of strings and files."""

from __future__ import annotations

import argparse
import hashlib
from pathlib import Path
from typing import NamedTuple

_DEMO_TEXT = "Hi,Pandaman!"
_CHUNK = 64 * 1024


class FileDigests(NamedTuple):
    """Hex digests of one file."""

    md5: str
    sha1: str


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def md5_hex(data: bytes | str) -> str:
    """Return the MD5 digest of ``data`` in hex."""
    return hashlib.md5(_as_bytes(data)).hexdigest()


def sha1_hex(data: bytes | str) -> str:
    """Return the SHA-1 digest of ``data`` in hex."""
    return hashlib.sha1(_as_bytes(data)).hexdigest()


def hash_file(path: str | Path) -> FileDigests:
    """Return the MD5 and SHA-1 digests of the file at ``path``.

    Raises ``OSError`` if the file cannot be read.
    """
    md5 = hashlib.md5()
    sha1 = hashlib.sha1()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK), b""):
            md5.update(chunk)
            sha1.update(chunk)
    return FileDigests(md5.hexdigest(), sha1.hexdigest())


def main(argv: list[str] | None = None) -> int:
    """Print digests of the given files, or of a sample string if none."""
    parser = argparse.ArgumentParser(prog="hashing", description="Print MD5 and SHA-1 digests.")
    parser.add_argument("files", nargs="*", help="files to hash")
    args = parser.parse_args(argv)

    if not args.files:
        print(md5_hex(_DEMO_TEXT) + "\n")
        print(sha1_hex(_DEMO_TEXT) + "\n")
        return 0

    for name in args.files:
        try:
            digests = hash_file(name)
        except OSError as exc:
            print(exc)
            return 1
        print(f"{digests.md5}\t{name} ")
        print(f"{digests.sha1}\t{name} ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())