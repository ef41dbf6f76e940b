# -*- coding: utf-8 -*-
"""
Выбор формата по расширению и вызов нужного загрузчика.
"""

from pathlib import Path

from meshdata.io.gltf_loader import load_gltf
from meshdata.io.obj_loader import load_obj
from meshdata.io.ply_loader import load_ply
from meshdata.mesh.data import MeshData
from meshdata.utils.config import get_config
from meshdata.utils.logger import logger

LOADERS = {
    "obj": load_obj,
    "ply": load_ply,
    "gltf": load_gltf,
}


def load_mesh(path, fmt: str | None = None, config=None) -> MeshData:
    """Загрузить меш любого поддерживаемого формата."""
    if path is None:
        raise ValueError("Invalid file path.")
    config = config or get_config()

    if fmt is None:
        fmt = config.format_for(path)
        if fmt is None:
            raise ValueError(f"Unknown mesh format for '{Path(path).name}'")
    fmt = fmt.lower()
    if fmt not in LOADERS:
        raise ValueError(f"Unknown mesh format: {fmt}")

    logger.debug(f"[Loader] {path} as {fmt}")
    return LOADERS[fmt](path, config)
