# -*- coding: utf-8 -*-
"""
Интерливинг уже проиндексированных атрибутов (glTF) в один VBO.
Дедупликация не нужна – glTF хранит вершины уже уникальными.
"""

import numpy as np

from meshdata.mesh.data import GLTF_LAYOUT, RawAttributeSet


def _place(out: np.ndarray, values, start: int, width: int) -> None:
    """Скопировать атрибут в колонки [start, start+width); лишнее – нули."""
    if values is None:
        return
    arr = np.asarray(values, dtype=np.float32)
    if arr.size == 0:
        return
    if arr.ndim == 1:
        # плоский список [u0, v0, u1, v1, ...]
        arr = arr[: arr.size - arr.size % width].reshape(-1, width)
    else:
        arr = arr.reshape(len(arr), -1)
    rows = min(len(arr), len(out))
    cols = min(arr.shape[1], width)
    out[:rows, start:start + cols] = arr[:rows, :cols]


def interleave(positions, uvs=None, normals=None, joints=None, weights=None) -> np.ndarray:
    """
    Для каждой вершины i: position[i], uv[i], normal[i], joints[i], weights[i].
    Отсутствующие (или более короткие) атрибуты заполняются нулями.
    Возвращает плоский float32‑массив, stride = 16.
    """
    positions = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    out = np.zeros((len(positions), GLTF_LAYOUT.stride), dtype=np.float32)
    out[:, 0:3] = positions
    for name, values in (("uv", uvs), ("normal", normals),
                         ("joints", joints), ("weights", weights)):
        start = GLTF_LAYOUT.offset(name)
        width = dict(GLTF_LAYOUT.fields)[name]
        _place(out, values, start, width)
    return out.ravel()


def interleave_raw(raw: RawAttributeSet) -> np.ndarray:
    """interleave() для набора атрибутов, уже выровненных по индексу вершины."""
    positions = raw.positions if len(raw.positions) else np.zeros((0, 3), dtype=np.float32)
    return interleave(positions, uvs=raw.uvs, normals=raw.normals,
                      joints=raw.joints, weights=raw.weights)
