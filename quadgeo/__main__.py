"""
Command line entry point: build one of the ready-made shapes and write OBJ.

Examples:
  python -m quadgeo --shape parallelogram --out para.obj
  python -m quadgeo --shape irregular --uv-mode world-xy --out quad.obj
  python -m quadgeo --shape prism --uv-mode world-xy --out prism.obj -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import shapes
from .builder import DEFAULT_UV_MODE, GeometryBuilder, UVMode
from .errors import QuadGeoError
from .export import save_obj
from .logging_config import setup_logging

logger = logging.getLogger("quadgeo.cli")

_SHAPES = {
    "parallelogram": lambda args: [shapes.parallelogram()],
    "irregular": lambda args: [shapes.irregular_quad()],
    "prism": lambda args: shapes.demo_prism(),
    "box": lambda args: shapes.box(args.width, args.height, args.depth),
}


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="quadgeo", description="quadgeo: quads to textured triangle meshes",
                                epilog=__doc__, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--shape", required=True, choices=sorted(_SHAPES))
    p.add_argument("--uv-mode", default=DEFAULT_UV_MODE.value, choices=[m.value for m in UVMode])
    p.add_argument("--out", required=True, help="Output .obj path")
    p.add_argument("--name", help="Object name written to the file (defaults to the shape)")
    p.add_argument("--width", type=float, default=1.0)
    p.add_argument("--height", type=float, default=1.0)
    p.add_argument("--depth", type=float, default=1.0)
    p.add_argument("-v", "--verbose", action="store_true", help="Log build details")
    p.add_argument("--log-file", help="Also write the log to this file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    builder = GeometryBuilder(uv_mode=UVMode(args.uv_mode), name=args.name or args.shape)
    builder.add_quads(_SHAPES[args.shape](args))

    try:
        mesh = builder.build()
    except QuadGeoError as e:
        logger.error(str(e))
        return 2

    save_obj(args.out, mesh)
    return 0


if __name__ == "__main__":
    sys.exit(main())
