"""
meshdata – нормализация 3‑D мешей (OBJ, ASCII PLY, glTF) в два плоских
буфера: интерливнутый VBO (float32) и треугольный EBO (uint32).
"""

from meshdata.utils import logger, Config
from meshdata.mesh import (
    GLTF_LAYOUT, OBJ_LAYOUT, MeshData, RawAttributeSet, VertexKey, VertexLayout,
    build_indexed, fan_triangulate, interleave,
)
from meshdata.io.obj_loader import load_obj, parse_obj
from meshdata.io.ply_loader import load_ply, parse_ply
from meshdata.io.gltf_loader import load_gltf
from meshdata.loader import load_mesh

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "MeshData",
    "RawAttributeSet",
    "VertexKey",
    "VertexLayout",
    "OBJ_LAYOUT",
    "GLTF_LAYOUT",
    "build_indexed",
    "fan_triangulate",
    "interleave",
    "parse_obj",
    "parse_ply",
    "load_obj",
    "load_ply",
    "load_gltf",
    "load_mesh",
]
