# -*- coding: utf-8 -*-
"""
conftest.py – фикстуры, которые пишут маленькие OBJ/PLY/glTF файлы
во временную папку теста.
"""

import base64
from pathlib import Path
from typing import Callable

import numpy as np
import pytest
from pygltflib import (
    ARRAY_BUFFER, ELEMENT_ARRAY_BUFFER, FLOAT, GLTF2, SCALAR, UNSIGNED_BYTE,
    UNSIGNED_INT, UNSIGNED_SHORT, VEC2, VEC3, VEC4,
    Accessor, Attributes, Buffer, BufferView, Image, Material, Mesh, Node,
    PbrMetallicRoughness, Primitive, Scene, Texture, TextureInfo,
)

from meshdata.utils.config import Config


# ----------------------------------------------------------------------
# Текстовые файлы
# ----------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str], Path]:
    """write_file("a.obj", "v 0 0 0\\n") → путь к файлу."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config() -> Config:
    """Чистая конфигурация по‑умолчанию (без файла)."""
    return Config()


# ----------------------------------------------------------------------
# glTF – квадрат из двух треугольников
# ----------------------------------------------------------------------
QUAD_POSITIONS = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=np.float32)
QUAD_NORMALS = np.array([[0, 0, 1]] * 4, dtype=np.float32)
QUAD_UVS = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=np.float32)
QUAD_INDICES = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)
QUAD_JOINTS = np.array([[0, 1, 0, 0], [1, 0, 0, 0], [2, 0, 0, 0], [3, 0, 0, 0]], dtype=np.uint8)
QUAD_WEIGHTS = np.array([[0.5, 0.5, 0, 0], [1, 0, 0, 0], [1, 0, 0, 0], [1, 0, 0, 0]],
                        dtype=np.float32)


class _BlobBuilder:
    """Собирает один буфер и bufferView/accessor‑ы поверх него."""

    def __init__(self, gltf: GLTF2):
        self.gltf = gltf
        self.blob = bytearray()

    def add_view(self, data: bytes, target=None, stride=None) -> int:
        while len(self.blob) % 4:
            self.blob.append(0)
        self.gltf.bufferViews.append(BufferView(buffer=0, byteOffset=len(self.blob),
                                                byteLength=len(data), byteStride=stride,
                                                target=target))
        self.blob.extend(data)
        return len(self.gltf.bufferViews) - 1

    def add_accessor(self, view: int, component: int, kind: str, count: int,
                     offset: int = 0, normalized: bool = False) -> int:
        self.gltf.accessors.append(Accessor(bufferView=view, byteOffset=offset,
                                            componentType=component, count=count, type=kind,
                                            normalized=normalized))
        return len(self.gltf.accessors) - 1


def build_quad_gltf(with_uv=True, with_skin=False, image=None, indexed=True,
                    normalized_uv=False) -> tuple[GLTF2, bytes]:
    gltf = GLTF2()
    gltf.scene = 0
    gltf.scenes = [Scene(nodes=[0])]
    gltf.nodes = [Node(mesh=0)]
    builder = _BlobBuilder(gltf)

    # позиции и нормали в одном bufferView с byteStride = 24
    interleaved = np.hstack([QUAD_POSITIONS, QUAD_NORMALS]).astype(np.float32)
    view = builder.add_view(interleaved.tobytes(), ARRAY_BUFFER, stride=24)
    attrs = Attributes(
        POSITION=builder.add_accessor(view, FLOAT, VEC3, 4, 0),
        NORMAL=builder.add_accessor(view, FLOAT, VEC3, 4, 12),
    )
    if with_uv and normalized_uv:
        # UNSIGNED_SHORT, normalized: 65535 → 1.0
        packed = (QUAD_UVS * 65535).astype("<u2")
        attrs.TEXCOORD_0 = builder.add_accessor(
            builder.add_view(packed.tobytes(), ARRAY_BUFFER), UNSIGNED_SHORT, VEC2, 4,
            normalized=True)
    elif with_uv:
        attrs.TEXCOORD_0 = builder.add_accessor(
            builder.add_view(QUAD_UVS.tobytes(), ARRAY_BUFFER), FLOAT, VEC2, 4)
    if with_skin:
        attrs.JOINTS_0 = builder.add_accessor(
            builder.add_view(QUAD_JOINTS.tobytes(), ARRAY_BUFFER), UNSIGNED_BYTE, VEC4, 4)
        attrs.WEIGHTS_0 = builder.add_accessor(
            builder.add_view(QUAD_WEIGHTS.tobytes(), ARRAY_BUFFER), FLOAT, VEC4, 4)

    primitive = Primitive(attributes=attrs)
    if indexed:
        primitive.indices = builder.add_accessor(
            builder.add_view(QUAD_INDICES.tobytes(), ELEMENT_ARRAY_BUFFER),
            UNSIGNED_INT, SCALAR, len(QUAD_INDICES))

    if image is not None:
        gltf.images = [image]
        gltf.textures = [Texture(source=0)]
        gltf.materials = [Material(pbrMetallicRoughness=PbrMetallicRoughness(
            baseColorTexture=TextureInfo(index=0)))]
        primitive.material = 0

    gltf.meshes = [Mesh(primitives=[primitive])]
    return gltf, bytes(builder.blob)


@pytest.fixture
def gltf_file(tmp_path) -> Callable[..., Path]:
    """Записать квадрат как .gltf (buffer – data:‑URI или внешний .bin) или .glb."""
    def _write(name: str = "quad.gltf", external: bool = False, **kwargs) -> Path:
        gltf, blob = build_quad_gltf(**kwargs)
        path = tmp_path / name
        if external:
            bin_name = path.stem + " data.bin"
            (tmp_path / bin_name).write_bytes(blob)
            gltf.buffers = [Buffer(byteLength=len(blob), uri=bin_name.replace(" ", "%20"))]
        elif path.suffix == ".glb":
            gltf.buffers = [Buffer(byteLength=len(blob))]
            gltf.set_binary_blob(blob)
        else:
            uri = "data:application/octet-stream;base64," + base64.b64encode(blob).decode("ascii")
            gltf.buffers = [Buffer(byteLength=len(blob), uri=uri)]
        gltf.save(str(path))
        return path
    return _write
