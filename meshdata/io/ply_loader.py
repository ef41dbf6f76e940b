# -*- coding: utf-8 -*-
"""
Парсер ASCII Stanford PLY.

Заголовок читается до строки «end_header», из него берутся только
количества `element vertex` / `element face` (поиск подстроки, первая
подходящая строка). Тело: N строк вершин → плоский VBO «как есть»,
затем F строк граней → веерная триангуляция в EBO. Строки после
первых N+F (прочие элементы: edge, material …) не читаются.
Бинарный PLY не поддерживается.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from meshdata.io.tokens import TokenReader, parse_float, parse_uint
from meshdata.mesh.data import MeshData
from meshdata.mesh.dedup import fan_triangulate
from meshdata.utils.config import get_config
from meshdata.utils.logger import logger, to_level
from meshdata.utils.profiler import Profiler

END_HEADER = "end_header"


@dataclass
class PlyDocument:
    """Результат разбора PLY до сборки MeshData."""
    vertex_count: int = 0
    face_count: int = 0
    vertex_properties: list[str] = field(default_factory=list)
    stride: int = 0
    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    failures: int = 0


def _element_count(header: list[str], element: str) -> int:
    """Третий токен первой строки, содержащей `element`; иначе 0."""
    line = next((h for h in header if element in h), None)
    if line is None:
        logger.warning(f"[PLY] Header has no '{element}' declaration, assuming 0")
        return 0
    tokens = line.split()
    value, ok = parse_uint(tokens[2]) if len(tokens) > 2 else (None, False)
    if not ok:
        logger.warning(f"[PLY] Bad count in header line '{line}', assuming 0")
        return 0
    return value


def _vertex_properties(header: list[str]) -> list[str]:
    """Имена свойств, объявленных сразу после `element vertex`."""
    names = []
    inside = False
    for line in header:
        tokens = line.split()
        if not tokens:
            continue
        if tokens[0] == "element":
            inside = len(tokens) > 1 and tokens[1] == "vertex"
            continue
        if inside and tokens[0] == "property" and len(tokens) > 2:
            names.append(tokens[-1])
    return names


def _read_face(line: str, doc: PlyDocument) -> None:
    tokens = TokenReader(line).tokens()
    if len(tokens) < 3:
        return
    count, ok = parse_uint(tokens[0])
    if not ok:
        doc.failures += 1
        return
    corners = []
    for token in tokens[1:count + 1]:
        value, ok = parse_uint(token)
        if ok:
            corners.append(value)
        else:
            doc.failures += 1
    for tri in fan_triangulate(corners):
        doc.indices.extend(tri)


def parse_ply(lines: Iterable[str]) -> PlyDocument:
    header = []
    lines = iter(lines)
    for line in lines:
        line = line.rstrip("\r\n")
        if line == END_HEADER:
            break
        header.append(line)
    else:
        # нет end_header – весь файл считается заголовком
        if any(h.strip() for h in header):
            logger.warning("[PLY] No 'end_header' line, body is empty")

    for h in header:
        if h.startswith("format") and "binary" in h:
            raise ValueError(f"[PLY] Binary PLY is not supported: '{h.strip()}'")

    body = [line.rstrip("\r\n") for line in lines]

    doc = PlyDocument()
    if not header and not body:
        return doc

    doc.vertex_count = _element_count(header, "element vertex")
    doc.face_count = _element_count(header, "element face")
    doc.vertex_properties = _vertex_properties(header)
    doc.stride = len(body[0].split()) if body else 0

    for line in body[:doc.vertex_count]:
        for token in line.split():
            value, ok = parse_float(token)
            if ok:
                doc.vertices.append(value)
            else:
                doc.failures += 1

    for line in body[doc.vertex_count:doc.vertex_count + doc.face_count]:
        _read_face(line, doc)

    return doc


def load_ply(path, config=None) -> MeshData:
    """Прочитать ASCII PLY, вернуть VBO «как в файле», EBO и stride."""
    if path is None:
        raise ValueError("Invalid file path.")
    config = config or get_config()
    level = logging.INFO if config["profile"] else logging.DEBUG

    with Profiler(f"PLY {path}", level):
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            doc = parse_ply(f)

    if doc.failures:
        logger.log(to_level(config["recovery_log_level"], logging.DEBUG),
                   f"[PLY] {path}: {doc.failures} malformed token(s) skipped")

    mesh = MeshData(np.array(doc.vertices, dtype=np.float32),
                    np.array(doc.indices, dtype=np.uint32),
                    doc.stride, source_format="ply",
                    properties=doc.vertex_properties)
    logger.debug(f"[PLY] Loaded {path}: {doc.vertex_count} vertices "
                 f"({', '.join(doc.vertex_properties) or 'no properties'}), "
                 f"{mesh.triangle_count} triangles")
    return mesh
