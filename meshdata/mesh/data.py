# -*- coding: utf-8 -*-
"""
Структуры данных нормализатора: «сырые» атрибуты, ключ вершины,
раскладка вершинной записи и итоговый MeshData (VBO + EBO).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import numpy as np


class VertexKey(NamedTuple):
    """Нормализованная ссылка угла грани OBJ: 0‑based индексы или None."""
    position: Optional[int]
    uv: Optional[int]
    normal: Optional[int]


@dataclass
class RawAttributeSet:
    """
    Параллельные списки атрибутов в порядке появления в файле.
    Любой список может быть короче `positions` – недостающие значения
    заполняются нулями при сборке вершинного буфера.
    """
    positions: list = field(default_factory=list)   # (x, y, z)
    uvs: list = field(default_factory=list)         # (u, v)
    normals: list = field(default_factory=list)     # (x, y, z)
    joints: list = field(default_factory=list)      # (j0..j3), только glTF
    weights: list = field(default_factory=list)     # (w0..w3), только glTF

    # glTF кладёт сюда numpy‑массивы (count, width), уже выровненные по
    # индексу вершины; OBJ – списки кортежей, адресуемые через VertexKey.


class VertexLayout:
    """Упорядоченный список полей вершинной записи: (имя, число float)."""
    def __init__(self, *fields: tuple[str, int]):
        self.fields = tuple(fields)
        self.stride = sum(width for _, width in self.fields)

    def offset(self, name: str) -> int:
        """Смещение поля (в float‑ах) от начала записи."""
        pos = 0
        for field_name, width in self.fields:
            if field_name == name:
                return pos
            pos += width
        raise KeyError(name)

    def __repr__(self):
        return f"VertexLayout({', '.join(f'{n}:{w}' for n, w in self.fields)})"


OBJ_LAYOUT = VertexLayout(("position", 3), ("uv", 2), ("normal", 3))
GLTF_LAYOUT = VertexLayout(("position", 3), ("uv", 2), ("normal", 3),
                           ("joints", 4), ("weights", 4))


@dataclass
class MeshData:
    """Результат одного извлечения: плоский VBO (float32) и EBO (uint32)."""
    vertices: np.ndarray
    indices: np.ndarray
    stride: int
    textures: list[str] = field(default_factory=list)
    source_format: str = ""
    properties: list[str] = field(default_factory=list)   # имена полей записи PLY

    def __post_init__(self):
        self.vertices = np.asarray(self.vertices, dtype=np.float32).ravel()
        self.indices = np.asarray(self.indices, dtype=np.uint32).ravel()

    @classmethod
    def empty(cls, stride: int, source_format: str = "") -> "MeshData":
        return cls(np.zeros(0, dtype=np.float32), np.zeros(0, dtype=np.uint32),
                   stride, source_format=source_format)

    @property
    def vertex_count(self) -> int:
        if self.stride <= 0:
            return 0
        return len(self.vertices) // self.stride

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def as_records(self) -> np.ndarray:
        """VBO в виде матрицы (vertex_count, stride)."""
        if self.stride <= 0:
            return np.zeros((0, 0), dtype=np.float32)
        return self.vertices[: self.vertex_count * self.stride].reshape(-1, self.stride)

    def triangles(self) -> np.ndarray:
        """EBO в виде матрицы (triangle_count, 3)."""
        return self.indices[: self.triangle_count * 3].reshape(-1, 3)
