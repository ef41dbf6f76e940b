# -*- coding: utf-8 -*-
"""
Чтение числовых токенов из строки текста.

Разбор не зависит от локали: десятичный разделитель всегда «.».
Битые float‑токены превращаются в значение по‑умолчанию (0.0),
битые индексы помечаются как неудачные – вызывающий код их пропускает.
"""

import re
from typing import NamedTuple, Optional

SPACE = " "
SLASH = "/"

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_FLOATS = {"nan", "+nan", "-nan", "inf", "+inf", "-inf",
                   "infinity", "+infinity", "-infinity"}
_UINT_RE = re.compile(r"\+?\d+")
UINT_MAX = 2 ** 32 - 1


class ParsedToken(NamedTuple):
    """Результат разбора: значение и признак успеха."""
    value: Optional[float]
    ok: bool


def parse_float(token: str, default: float = 0.0) -> ParsedToken:
    token = token.strip()
    if _FLOAT_RE.fullmatch(token) or token.lower() in _SPECIAL_FLOATS:
        return ParsedToken(float(token), True)
    return ParsedToken(default, False)


def parse_uint(token: str) -> ParsedToken:
    token = token.strip()
    if not _UINT_RE.fullmatch(token):
        return ParsedToken(None, False)
    value = int(token)
    if value > UINT_MAX:
        return ParsedToken(None, False)
    return ParsedToken(value, True)


class TokenReader:
    """Курсор по строке: выдаёт токены по одному, разделитель – пробел или «/»."""

    def __init__(self, line: str):
        self.line = line
        self.pos = 0
        self.failures = 0

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.line) or not self.line[self.pos:].strip()

    def next_token(self, delimiter: str = SPACE) -> str:
        line = self.line
        if delimiter == SPACE:
            # пропускаем серию пробельных символов
            while self.pos < len(line) and line[self.pos].isspace():
                self.pos += 1
            start = self.pos
            while self.pos < len(line) and not line[self.pos].isspace():
                self.pos += 1
            return line[start:self.pos]

        if self.pos > len(line):
            return ""
        end = line.find(delimiter, self.pos)
        if end == -1:
            end = len(line)
        token = line[self.pos:end]
        self.pos = end + 1
        return token

    def next_float(self, default: float = 0.0) -> float:
        value, ok = parse_float(self.next_token(), default)
        if not ok:
            self.failures += 1
        return value

    def next_uint(self, delimiter: str = SPACE) -> Optional[int]:
        value, ok = parse_uint(self.next_token(delimiter))
        if not ok:
            self.failures += 1
        return value

    def tokens(self, delimiter: str = SPACE) -> list[str]:
        """Все оставшиеся токены (для SPACE – только непустые)."""
        out = []
        if delimiter == SPACE:
            while not self.exhausted:
                out.append(self.next_token(SPACE))
        else:
            while self.pos <= len(self.line):
                out.append(self.next_token(delimiter))
        return out
