# -*- coding: utf-8 -*-
"""
python -m meshdata PATH – загрузить меш и вывести краткую сводку.
"""

import argparse
import sys

from meshdata.loader import LOADERS, load_mesh
from meshdata.utils.config import Config
from meshdata.utils.logger import logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="meshdata",
                                     description="Normalize a mesh file into vertex/index buffers.")
    parser.add_argument("path", help="OBJ, PLY, glTF or GLB file")
    parser.add_argument("--format", choices=sorted(LOADERS), default=None,
                        help="force the input format instead of guessing by extension")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--indices", action="store_true", help="print the index buffer")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(args.config)
    set_level("DEBUG" if args.verbose else config["log_level"])

    try:
        mesh = load_mesh(args.path, args.format, config)
    except (OSError, ValueError) as exc:
        logger.error(f"[CLI] {exc}")
        return 1

    print(f"{mesh.source_format}: {mesh.vertex_count} vertices, stride {mesh.stride}, "
          f"{mesh.triangle_count} triangles, textures {mesh.textures}")
    if args.indices:
        for tri in mesh.triangles():
            print(*tri.tolist())
    return 0


if __name__ == "__main__":
    sys.exit(main())
