# -*- coding: utf-8 -*-
"""
Дедупликация вершин и веерная триангуляция.

Каждая уникальная комбинация (позиция, uv, нормаль) становится ровно
одной записью VBO; повторные ссылки получают уже выданный индекс.
Полигоны с K > 3 углами раскладываются веером вокруг угла 0.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from meshdata.io.tokens import SLASH, TokenReader, parse_uint
from meshdata.mesh.data import OBJ_LAYOUT, RawAttributeSet, VertexKey, VertexLayout


def fan_triangulate(corners: Sequence) -> list[tuple]:
    """(v0,v1,v2), (v0,v2,v3) … (v0,v[K-2],v[K-1]); K < 3 → []."""
    if len(corners) < 3:
        return []
    v0 = corners[0]
    return [(v0, corners[i], corners[i + 1]) for i in range(1, len(corners) - 1)]


def parse_reference(token: str) -> Optional[VertexKey]:
    """
    "p/t/n" → VertexKey с 0‑based индексами.

    Пустой под‑токен означает «атрибута нет» (None).
    Нечисловой под‑токен (в т.ч. отрицательный индекс) – угол отбрасывается.
    """
    parts = TokenReader(token).tokens(SLASH)[:3]
    parts += [""] * (3 - len(parts))
    key = []
    for part in parts:
        if not part:
            key.append(None)
            continue
        value, ok = parse_uint(part)
        if not ok:
            return None
        key.append(value - 1)
    return VertexKey(*key)


# поле раскладки → (атрибут RawAttributeSet, компонент VertexKey с индексом)
# joints/weights привязаны к позиции, как в скиннинге glTF
_FIELD_SOURCES = {
    "position": ("positions", "position"),
    "uv": ("uvs", "uv"),
    "normal": ("normals", "normal"),
    "joints": ("joints", "position"),
    "weights": ("weights", "position"),
}


def _lookup(values, index: Optional[int], width: int) -> Sequence[float]:
    if values is None or index is None or index < 0 or index >= len(values):
        return (0.0,) * width
    found = tuple(values[index])[:width]
    return found + (0.0,) * (width - len(found))


class VertexDeduplicator:
    """Карта VertexKey → индекс записи; создаётся заново на каждое извлечение."""

    def __init__(self, raw: RawAttributeSet, layout: VertexLayout = OBJ_LAYOUT):
        self.raw = raw
        self.layout = layout
        self.vertex_map: dict[VertexKey, int] = {}
        self.vertex_data: list[float] = []
        self.index_data: list[int] = []

    def _emit(self, key: VertexKey) -> int:
        index = self.vertex_map.get(key)
        if index is not None:
            return index
        index = len(self.vertex_map)
        self.vertex_map[key] = index
        # поля в порядке раскладки; неизвестные поля – нули
        for name, width in self.layout.fields:
            attr, component = _FIELD_SOURCES.get(name, (None, None))
            values = getattr(self.raw, attr) if attr else None
            key_index = getattr(key, component) if component else None
            self.vertex_data.extend(_lookup(values, key_index, width))
        return index

    def add_face(self, corners: Sequence[VertexKey]) -> int:
        """Добавить грань, вернуть число выданных треугольников."""
        triangles = fan_triangulate(corners)
        for tri in triangles:
            for key in tri:
                self.index_data.append(self._emit(key))
        return len(triangles)

    def buffers(self) -> tuple[np.ndarray, np.ndarray]:
        vertices = np.array(self.vertex_data, dtype=np.float32)
        indices = np.array(self.index_data, dtype=np.uint32)
        return vertices, indices


def build_indexed(raw: RawAttributeSet,
                  faces: Sequence[Sequence[str]],
                  layout: VertexLayout = OBJ_LAYOUT) -> tuple[np.ndarray, np.ndarray, int]:
    """
    Собрать (VBO, EBO) из «сырых» атрибутов и граней со строковыми ссылками.

    Возвращает также число отброшенных углов (битые ссылки) – это
    не ошибка, вызывающий код только пишет его в лог.
    """
    dedup = VertexDeduplicator(raw, layout)
    rejected = 0
    for face in faces:
        corners = []
        for token in face:
            key = parse_reference(token)
            if key is None:
                rejected += 1
                continue
            corners.append(key)
        dedup.add_face(corners)
    vertices, indices = dedup.buffers()
    return vertices, indices, rejected
