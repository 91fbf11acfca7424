from __future__ import annotations

import json
import tomllib
from pathlib import PurePath

from result import Err, Ok, Result

from treepeek.models.value import Value
from treepeek.services.fs import DEFAULT_FS, FileSystem

STDIN_PATH = "-"
FORMATS: tuple[str, ...] = ("auto", "json", "toml")

_SUFFIX_FORMATS: dict[str, str] = {
    ".json": "json",
    ".toml": "toml",
}


def detect_format(path: str) -> str:
    if path == STDIN_PATH:
        return "json"
    return _SUFFIX_FORMATS.get(PurePath(path).suffix.lower(), "json")


def parse_document(text: str, fmt: str) -> Value:
    if fmt == "toml":
        return tomllib.loads(text)
    return json.loads(text)


def load_document(path: str, fmt: str = "auto", fs: FileSystem = DEFAULT_FS) -> Result[Value, str]:
    """Read and parse the document at *path* (``-`` for stdin)."""
    if fmt not in FORMATS:
        return Err(f"Unknown format: {fmt}. Use: {', '.join(FORMATS)}.")
    resolved_fmt = detect_format(path) if fmt == "auto" else fmt
    source = "stdin" if path == STDIN_PATH else path

    if path != STDIN_PATH:
        source = fs.expanduser(path)
        if not fs.exists(source):
            return Err(f"Input file {source} does not exist.")
    try:
        text = fs.read_stdin() if path == STDIN_PATH else fs.read_text(source)
    except (OSError, UnicodeDecodeError) as exc:
        return Err(f"Failed reading {source}: {exc}")

    try:
        return Ok(parse_document(text, resolved_fmt))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        return Err(f"Failed parsing {source} as {resolved_fmt}: {exc}")
