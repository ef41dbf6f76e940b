"""
Пакет mesh – модель данных, дедупликация/триангуляция и интерливинг.
"""

from meshdata.mesh.data import (
    GLTF_LAYOUT, OBJ_LAYOUT, MeshData, RawAttributeSet, VertexKey, VertexLayout,
)
from meshdata.mesh.dedup import (
    VertexDeduplicator, build_indexed, fan_triangulate, parse_reference,
)
from meshdata.mesh.interleave import interleave

__all__ = ["GLTF_LAYOUT", "OBJ_LAYOUT", "MeshData", "RawAttributeSet",
           "VertexKey", "VertexLayout", "VertexDeduplicator", "build_indexed",
           "fan_triangulate", "parse_reference", "interleave"]
