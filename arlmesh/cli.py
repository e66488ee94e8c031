"""Command that converts a mesh into an ARL triangle-strip grid file."""

from __future__ import annotations

import sys
from typing import Sequence

from arlmesh.command_parser import UsageError, parse_args
from arlmesh.mesh_export import export_arl_file
from arlmesh.mesh_import import MeshImportError, load_mesh
from arlmesh.triangle_strip import build_triangle_strip


def main(argv: Sequence[str] | None = None) -> int:
    """Run the conversion; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError as error:
        print(error)
        return 0

    try:
        mesh = load_mesh(options.mesh_path)
        strip = build_triangle_strip(
            mesh.vertices, options.stride, options.rows, options.columns
        )
        export_arl_file(
            options.output_path, strip.strip_length, strip.vertices, strip.indices
        )
    except (MeshImportError, OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())