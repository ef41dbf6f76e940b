# -*- coding: utf-8 -*-
"""
glTF / GLB → MeshData.

Документ разбирает pygltflib; здесь только чтение accessor‑ов в numpy
и интерливинг первой примитивы первого меша. Дедупликация не нужна –
glTF уже хранит индексированные уникальные вершины.
"""

from __future__ import annotations

import base64
import logging
from pathlib import Path
from urllib.parse import unquote

import numpy as np
from pygltflib import (
    BYTE, FLOAT, GLTF2, SHORT, TRIANGLES, UNSIGNED_BYTE, UNSIGNED_INT, UNSIGNED_SHORT,
)

from meshdata.mesh.data import GLTF_LAYOUT, MeshData, RawAttributeSet
from meshdata.mesh.interleave import interleave_raw
from meshdata.utils.config import get_config
from meshdata.utils.logger import logger
from meshdata.utils.profiler import Profiler

# componentType → little‑endian dtype
_COMPONENT_DTYPES = {
    BYTE: np.dtype("<i1"),
    UNSIGNED_BYTE: np.dtype("<u1"),
    SHORT: np.dtype("<i2"),
    UNSIGNED_SHORT: np.dtype("<u2"),
    UNSIGNED_INT: np.dtype("<u4"),
    FLOAT: np.dtype("<f4"),
}

_TYPE_WIDTHS = {
    "SCALAR": 1, "VEC2": 2, "VEC3": 3, "VEC4": 4,
    "MAT2": 4, "MAT3": 9, "MAT4": 16,
}


class _BufferCache:
    """Байты буферов документа (GLB‑blob, data:‑URI или внешний .bin)."""

    def __init__(self, gltf: GLTF2, base_dir: Path):
        self.gltf = gltf
        self.base_dir = base_dir
        self._data: dict[int, bytes] = {}

    def get(self, index: int) -> bytes:
        if index not in self._data:
            self._data[index] = self._read(index)
        return self._data[index]

    def _read(self, index: int) -> bytes:
        uri = self.gltf.buffers[index].uri
        if uri is None:
            return self.gltf.binary_blob() or b""
        if uri.startswith("data:"):
            return base64.b64decode(uri.split(",", 1)[1])
        return (self.base_dir / unquote(uri)).read_bytes()


def read_accessor(gltf: GLTF2, index: int, buffers: _BufferCache) -> np.ndarray:
    """Accessor → массив (count, width); normalized‑целые переводятся в float."""
    accessor = gltf.accessors[index]
    dtype = _COMPONENT_DTYPES[accessor.componentType]
    width = _TYPE_WIDTHS[accessor.type]
    count = accessor.count or 0

    if accessor.sparse is not None:
        logger.warning(f"[glTF] Accessor {index} is sparse, sparse values are ignored")
    if accessor.bufferView is None or count == 0:
        # accessor без bufferView по стандарту заполнен нулями
        return np.zeros((count, width), dtype=dtype)

    view = gltf.bufferViews[accessor.bufferView]
    data = buffers.get(view.buffer)
    item_size = dtype.itemsize * width
    stride = view.byteStride or item_size
    start = (view.byteOffset or 0) + (accessor.byteOffset or 0)

    raw = np.frombuffer(data, dtype=np.uint8,
                        count=stride * (count - 1) + item_size, offset=start)
    rows = np.lib.stride_tricks.as_strided(raw, shape=(count, item_size), strides=(stride, 1),
                                           writeable=False)
    values = np.ascontiguousarray(rows).view(dtype).reshape(count, width)

    if accessor.normalized and dtype.kind in "iu":
        scale = float(np.iinfo(dtype).max)
        values = np.maximum(values.astype(np.float32) / scale, -1.0)
    return values


def _texture_ids(gltf: GLTF2, primitive) -> list[str]:
    """Идентификатор diffuse (baseColor) текстуры примитивы, 0 или 1 элемент."""
    if primitive.material is None:
        return []
    material = gltf.materials[primitive.material]
    pbr = material.pbrMetallicRoughness
    info = pbr.baseColorTexture if pbr is not None else None
    if info is None or info.index is None:
        return []

    texture = gltf.textures[info.index]
    if texture.source is None:
        return []
    image = gltf.images[texture.source]

    # имя файла из uri → имя изображения → синтетический ключ
    if image.uri and not image.uri.startswith("data:"):
        return [Path(unquote(image.uri)).name]
    if image.name:
        return [image.name]
    return [f"glTF_Texture_{info.index}"]


def load_gltf(path, config=None) -> MeshData:
    """
    Прочитать .gltf/.glb, вернуть VBO (pos3 uv2 normal3 joints4 weights4),
    EBO и список текстур. Учитывается только meshes[0].primitives[0].
    """
    if path is None:
        raise ValueError("Invalid file path.")
    config = config or get_config()
    level = logging.INFO if config["profile"] else logging.DEBUG

    with Profiler(f"glTF {path}", level):
        gltf = GLTF2.load(str(path))
        if gltf is None:
            raise ValueError(f"[glTF] Unable to load document: {path}")

        if not gltf.meshes or not gltf.meshes[0].primitives:
            logger.warning(f"[glTF] {path}: document has no meshes")
            return MeshData.empty(GLTF_LAYOUT.stride, source_format="gltf")
        if len(gltf.meshes) > 1 or len(gltf.meshes[0].primitives) > 1:
            logger.info(f"[glTF] {path}: only the first mesh/primitive is extracted")

        primitive = gltf.meshes[0].primitives[0]
        if primitive.mode not in (None, TRIANGLES):
            logger.warning(f"[glTF] {path}: primitive mode {primitive.mode} "
                           f"is not TRIANGLES, indices are passed through")

        buffers = _BufferCache(gltf, Path(path).parent)
        attrs = primitive.attributes

        def attribute(name, width):
            index = getattr(attrs, name, None)
            if index is None:
                return np.zeros((0, width), dtype=np.float32)
            return read_accessor(gltf, index, buffers)

        raw = RawAttributeSet(positions=attribute("POSITION", 3),
                              uvs=attribute("TEXCOORD_0", 2),
                              normals=attribute("NORMAL", 3),
                              joints=attribute("JOINTS_0", 4),
                              weights=attribute("WEIGHTS_0", 4))
        vertices = interleave_raw(raw)

        if primitive.indices is not None:
            indices = read_accessor(gltf, primitive.indices, buffers).ravel().astype(np.uint32)
        else:
            indices = np.arange(len(raw.positions), dtype=np.uint32)

        textures = _texture_ids(gltf, primitive)

    mesh = MeshData(vertices, indices, GLTF_LAYOUT.stride, textures=textures,
                    source_format="gltf")
    logger.debug(f"[glTF] Loaded {path}: {mesh.vertex_count} vertices, "
                 f"{mesh.triangle_count} triangles, textures={textures}")
    return mesh
