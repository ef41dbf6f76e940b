# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ (позиции, texcoords, нормали, грани).
Материалы MTL, группы и сглаживание игнорируются.
"""

import logging
from typing import Iterable

from meshdata.io.tokens import TokenReader
from meshdata.mesh.data import OBJ_LAYOUT, MeshData, RawAttributeSet
from meshdata.mesh.dedup import build_indexed
from meshdata.utils.config import get_config
from meshdata.utils.logger import logger, to_level
from meshdata.utils.profiler import Profiler


def parse_obj(lines: Iterable[str]) -> tuple[RawAttributeSet, list[list[str]], int]:
    """
    Построчный разбор OBJ без заглядывания вперёд.

    Возвращает (сырые атрибуты, грани, число битых float‑токенов).
    Грань – список ссылок углов в исходном виде ("12/4/7", "3//2", "5").
    """
    raw = RawAttributeSet()
    faces = []
    failures = 0

    for line in lines:
        reader = TokenReader(line)
        prefix = reader.next_token()
        if not prefix or prefix.startswith('#'):
            continue
        if prefix == 'v':
            raw.positions.append((reader.next_float(), reader.next_float(), reader.next_float()))
        elif prefix == 'vt':
            raw.uvs.append((reader.next_float(), reader.next_float()))
        elif prefix == 'vn':
            raw.normals.append((reader.next_float(), reader.next_float(), reader.next_float()))
        elif prefix == 'f':
            # форматы: v, v/vt, v//vn, v/vt/vn
            faces.append(reader.tokens())
        failures += reader.failures

    return raw, faces, failures


def load_obj(path, config=None) -> MeshData:
    """Прочитать OBJ‑файл и вернуть VBO (pos3 + uv2 + normal3) и EBO."""
    if path is None:
        raise ValueError("Invalid file path.")
    config = config or get_config()
    level = logging.INFO if config["profile"] else logging.DEBUG

    with Profiler(f"OBJ {path}", level):
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            raw, faces, failures = parse_obj(f)
        vertices, indices, rejected = build_indexed(raw, faces, OBJ_LAYOUT)

    if failures or rejected:
        logger.log(to_level(config["recovery_log_level"], logging.DEBUG),
                   f"[OBJ] {path}: {failures} malformed numeric token(s) zero-filled, "
                   f"{rejected} malformed corner reference(s) skipped")

    mesh = MeshData(vertices, indices, OBJ_LAYOUT.stride, source_format="obj")
    logger.debug(f"[OBJ] Loaded {path}: {mesh.vertex_count} vertices, "
                 f"{mesh.triangle_count} triangles")
    return mesh
