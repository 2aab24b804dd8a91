"""
電話號碼正規化工具

NETIM API 接受的格式為 "+<國際區碼> <國內號碼>"，例如：
- 06 12 34 56 78（FR） -> +33 612345678
- +33612345678（FR）    -> +33 612345678
- 0033612345678（FR）   -> +33 612345678

分隔符號（空格、破折號、點、括號）一律移除。
驗證另外由 is_valid_phone 處理（使用 Google 的 libphonenumber Python 版本：phonenumbers）。
"""

import re
from typing import Optional

import phonenumbers
import structlog
from phonenumbers import NumberParseException

logger = structlog.get_logger()

_SEPARATORS = re.compile(r"[\s\-\.\(\)]")


def _preprocess_phone(phone: str) -> str:
    """預處理電話號碼字串"""
    # 全形字元轉半形
    phone = phone.replace("　", " ")
    phone = phone.replace("－", "-")
    phone = phone.replace("（", "(").replace("）", ")")
    phone = phone.replace("．", ".")
    phone = phone.replace("＋", "+")
    return _SEPARATORS.sub("", phone)


def format_phone_number(phone: Optional[str], dialing_prefix: Optional[str]) -> str:
    """
    正規化電話號碼為 API 格式

    Args:
        phone: 原始電話號碼字串
        dialing_prefix: 目標國家的國際區碼（不含 +），例如 "33"

    Returns:
        "+<區碼> <國內號碼>"；空字串輸入回傳空字串。

    注意：以其他國家區碼開頭的號碼無法判斷區碼長度，
    "+" 開頭時取前三個字元、"00" 開頭時取後兩位當作區碼。這只是盡力而為的結果，
    不保證區碼正確。
    """
    if not phone:
        return ""

    cleaned = _preprocess_phone(phone)
    if not cleaned:
        return ""

    if cleaned.startswith("+"):
        if dialing_prefix and cleaned.startswith("+" + dialing_prefix):
            return f"+{dialing_prefix} {cleaned[1 + len(dialing_prefix):]}"
        # 其他國家的國際格式，無法取出區碼
        logger.debug("Foreign international phone prefix", phone=cleaned, expected_prefix=dialing_prefix)
        return f"{cleaned[:3]} {cleaned[3:]}"

    if cleaned.startswith("00"):
        if dialing_prefix and cleaned.startswith("00" + dialing_prefix):
            return f"+{dialing_prefix} {cleaned[2 + len(dialing_prefix):]}"
        logger.debug("Foreign international access code", phone=cleaned, expected_prefix=dialing_prefix)
        return f"+{cleaned[2:4]} {cleaned[4:]}"

    if not dialing_prefix:
        # 國家沒有已知區碼，無法轉為國際格式
        logger.debug("No dialing prefix for country, phone left as-is", phone=cleaned)
        return cleaned

    # 國內格式：去掉第一個字元（長途冠碼）
    return f"+{dialing_prefix} {cleaned[1:]}"


def is_valid_phone(phone: Optional[str], region: Optional[str] = None) -> bool:
    """
    檢查電話號碼是否有效

    正規化不會驗證號碼；需要驗證的呼叫端可以對正規化結果再呼叫此函數。
    """
    if not phone:
        return False

    try:
        parsed = phonenumbers.parse(phone, (region or "").upper() or None)
        return phonenumbers.is_valid_number(parsed)
    except NumberParseException as e:
        logger.debug("Failed to parse phone number", phone=phone, region=region, error=str(e))
        return False


__all__ = [
    "format_phone_number",
    "is_valid_phone",
]
