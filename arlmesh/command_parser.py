"""Command-line option parsing for the mesh conversion command."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

USAGE = "\n".join(
    [
        "Usage: arlmesh --mesh_path <file_path> --output_path <file_path>"
        " --rows <int> --columns <int> --stride <float>",
        "    mesh_path: Path to the mesh to be transformed (full path)",
        "    output_path: Path to the binary .arl file (full path)",
        "    rows: Number of rows of quads (+x axis)",
        "    columns: Number of columns of quads (+z axis)",
        "    stride: Size of each quad (assumed square)",
        "    help: Display this message and return",
    ]
)
HELP_HINT = "For usage: arlmesh --help"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class UsageError(Exception):
    """The arguments did not describe a run; the message is what to show."""

    def __init__(self, message: str, help_requested: bool = False) -> None:
        super().__init__(message)
        self.help_requested = help_requested


@dataclass(frozen=True)
class Options:
    """Settings for one conversion run."""

    mesh_path: str
    output_path: str
    rows: int = 1
    columns: int = 1
    stride: float = 1.0


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _count(text: str) -> int:
    value = _leading_int(text)
    if value < 0:
        raise UsageError(f"count must not be negative: {text!r}")
    return value


_OPTIONS: dict[str, tuple[str, Callable[[str], object]]] = {
    "--mesh_path": ("mesh_path", str),
    "--output_path": ("output_path", str),
    "--rows": ("rows", _count),
    "--columns": ("columns", _count),
    "--stride": ("stride", _leading_float),
}


def parse_args(argv: Iterable[str]) -> Options:
    """Parse arguments (without the program name) into :class:`Options`.

    Numbers are read leniently from their leading digits, as unparsable text
    reads as zero. ``--help`` and unknown flags raise :class:`UsageError`.
    """
    values: dict[str, object] = {}
    args = iter(argv)
    for arg in args:
        if arg == "--help":
            raise UsageError(USAGE, help_requested=True)
        option = _OPTIONS.get(arg)
        if option is None:
            raise UsageError(HELP_HINT)
        name, convert = option
        raw = next(args, None)
        if raw is None:
            raise UsageError(f"{arg} needs a value")
        values[name] = convert(raw)

    for name in ("mesh_path", "output_path"):
        if not values.get(name):
            raise UsageError(f"--{name} is required")
    return Options(**values)  # type: ignore[arg-type]