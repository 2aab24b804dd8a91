"""
文字正規化工具

- strip_accents: 拉丁字母去重音（Latin-1 / Latin Extended-A）
- canonicalize_punctuation: 排版引號、破折號、商標符號轉為 ASCII / HTML entity
- fold: 用於比對的 key（不會送到 API）
- special_character: 實際送到 API 前套用的清理
"""

import re
from typing import Optional

# 去重音對照表：目標字元 -> 來源字元
_ACCENT_GROUPS = {
    "a": "àáâãäåāăą",
    "c": "çćĉċč",
    "d": "ďđ",
    "e": "èéêëēĕėęě",
    "g": "ĝğġģ",
    "h": "ĥħ",
    "i": "ìíîïĩīĭįı",
    "j": "ĵ",
    "k": "ķ",
    "l": "ĺļľŀł",
    "n": "ñńņňŉ",
    "o": "òóôõöōŏőøð",
    "r": "ŕŗř",
    "s": "śŝšș",
    "t": "ťŧț",
    "u": "ùúûüũūŭůűų",
    "w": "ŵ",
    "y": "ýÿŷ",
    "z": "źżž",
    "A": "ÀÁÂÃÄÅĀĂĄ",
    "C": "ÇĆĈĊČ",
    "D": "ĎĐÐ",
    "E": "ÈÉÊËĒĔĖĘĚ",
    "G": "ĜĞĠĢ",
    "H": "ĤĦ",
    "I": "ÌÍÎÏĨĪĬĮİ",
    "J": "Ĵ",
    "K": "Ķ",
    "L": "ĹĻĽĿŁ",
    "N": "ÑŃŅŇ",
    "O": "ÒÓÔÕÖŌŎŐØ",
    "R": "ŔŖŘ",
    "S": "ŚŜŠȘ",
    "T": "ŤŦȚ",
    "U": "ÙÚÛÜŨŪŬŮŰŲ",
    "W": "Ŵ",
    "Y": "ÝŸŶ",
    "Z": "ŹŻŽ",
}

# 連字（ligature）轉為兩個字母
_LIGATURES = {
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ß": "ss",
}

_ACCENT_TABLE = str.maketrans(
    {
        **{char: plain for plain, chars in _ACCENT_GROUPS.items() for char in chars},
        **_LIGATURES,
    }
)

_PUNCTUATION_TABLE = str.maketrans(
    {
        # 引號
        "`": "'",
        "´": "'",
        "‘": "'",
        "’": "'",
        "„": '"',
        "“": '"',
        "”": '"',
        # 項目符號、破折號、商標
        "•": "&#8226;",
        "–": "&ndash;",
        "—": "&mdash;",
        "™": "&#8482;",
        "©": "&copy;",
        "®": "&reg;",
    }
)

_SEPARATORS = re.compile(r"[-_]")


def strip_accents(text: Optional[str]) -> str:
    """去除重音符號，對照表以外的字元原樣保留"""
    if not text:
        return ""
    return text.translate(_ACCENT_TABLE)


def canonicalize_punctuation(text: Optional[str]) -> str:
    """排版符號轉為 API 接受的 ASCII / HTML entity，不改變大小寫"""
    if not text:
        return ""
    return text.translate(_PUNCTUATION_TABLE)


def fold(text: Optional[str]) -> str:
    """
    產生模糊比對用的 key

    去重音 + 標點正規化，破折號與底線轉空白、移除逗號，最後轉小寫。
    只用於比對，不可作為送到 API 的值。
    """
    result = canonicalize_punctuation(strip_accents(text))
    result = _SEPARATORS.sub(" ", result).replace(",", "")
    return result.lower()


def special_character(text: Optional[str]) -> str:
    """送出前的清理：只做標點正規化，保留大小寫"""
    return canonicalize_punctuation(text)


__all__ = [
    "strip_accents",
    "canonicalize_punctuation",
    "fold",
    "special_character",
]
