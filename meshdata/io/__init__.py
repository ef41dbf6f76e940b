"""
Пакет io – построчные парсеры OBJ/PLY и мост к glTF‑декодеру.

Загрузчики импортируются напрямую из модулей
(`meshdata.io.obj_loader` и т.д.), здесь экспортируется только
чтение токенов, у которого нет зависимостей внутри пакета.
"""

from meshdata.io.tokens import SLASH, SPACE, ParsedToken, TokenReader, parse_float, parse_uint

__all__ = ["SLASH", "SPACE", "ParsedToken", "TokenReader", "parse_float", "parse_uint"]
