"""
欄位正規化服務：國家、州、電話

比對流程（國家與州相同）：
1. 與標準代碼做不分大小寫的完全比對
2. 與別名做整串錨定、不分大小寫的正規表示式比對
3. 都沒有比對到時套用 FallbackPolicy（不會拋出異常，只記錄 debug log）
"""

import re
from enum import Enum
from typing import Mapping, Optional, Tuple

import structlog

from src.netim_connector.core.data.lookup_tables import DEFAULT_TABLES, LookupTables
from src.netim_connector.core.utils.phone_utils import format_phone_number
from src.netim_connector.core.utils.text_utils import fold

logger = structlog.get_logger()


class MatchPolicy(str, Enum):
    """別名比對方式"""

    EXACT = "exact"  # fold 後完全相等
    PATTERN = "pattern"  # fold 後整串符合正規表示式


class FallbackPolicy(str, Enum):
    """找不到對應代碼時的處理方式"""

    KEEP_INPUT = "keep_input"  # 原樣回傳輸入
    FIRST_ENTRY = "first_entry"  # 回傳對照表第一個代碼


def first_match(
    text: Optional[str],
    table: Mapping[str, Tuple[str, ...]],
    policy: MatchPolicy,
) -> Optional[str]:
    """
    依對照表順序回傳第一個符合的 key

    Args:
        text: 要比對的字串（會先 fold）
        table: key -> 別名 / 樣式
        policy: EXACT 或 PATTERN

    Returns:
        符合的 key，沒有則回傳 None
    """
    key = fold(text).strip()
    if not key:
        return None

    for code, patterns in table.items():
        for pattern in patterns:
            if policy is MatchPolicy.EXACT:
                if fold(pattern) == key:
                    return code
            elif re.fullmatch(pattern, key, re.IGNORECASE):
                return code
    return None


def _code_table(table: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
    return {code: (code,) for code in table}


class FieldNormalizer:
    """國家 / 州 / 電話正規化"""

    def __init__(
        self,
        tables: Optional[LookupTables] = None,
        fallback: FallbackPolicy = FallbackPolicy.KEEP_INPUT,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.fallback = FallbackPolicy(fallback)

    def _lookup(self, value: str, aliases: Mapping[str, Tuple[str, ...]]) -> Optional[str]:
        return (
            first_match(value, _code_table(aliases), MatchPolicy.EXACT)
            or first_match(value, aliases, MatchPolicy.PATTERN)
        )

    def _apply_fallback(self, value: str, aliases: Mapping[str, Tuple[str, ...]], field: str, **context) -> str:
        if self.fallback is FallbackPolicy.FIRST_ENTRY:
            result = next(iter(aliases))
        else:
            result = value

        logger.debug("No lookup match, fallback applied",
                     field=field,
                     value=value,
                     policy=self.fallback.value,
                     result=result,
                     **context)
        return result

    def country(self, value: Optional[str]) -> str:
        """
        正規化國家為 ISO 3166-1 代碼

        空字串輸入回傳空字串；找不到時依 fallback 處理。
        """
        if not value or not value.strip():
            return ""

        aliases = self.tables.country_aliases
        code = self._lookup(value, aliases)
        if code:
            return code
        return self._apply_fallback(value, aliases, "country")

    def state(self, value: Optional[str], country: Optional[str]) -> str:
        """
        正規化州代碼（限定在已正規化的國家內）

        國家不明或沒有州對照表時一律回傳空字串。
        KEEP_INPUT 時找不到的州會原樣回傳，結果不一定是有效的州代碼；
        需要保證為代碼或空字串時請使用 FIRST_ENTRY。
        """
        aliases = self.tables.states_for((country or "").upper())
        if not aliases or not value or not value.strip():
            return ""

        code = self._lookup(value, aliases)
        if code:
            return code
        return self._apply_fallback(value, aliases, "state", country=country)

    def phone(self, value: Optional[str], country: Optional[str]) -> str:
        """正規化電話為 "+<區碼> <國內號碼>" """
        return format_phone_number(value, self.tables.prefix_for(country))

    def denormalize_state(self, code: Optional[str], country: Optional[str]) -> str:
        """州代碼 -> 顯示名稱；未知代碼原樣回傳"""
        if not code:
            return ""
        name = self.tables.state_name((country or "").upper(), code)
        return name if name is not None else code


# 全域正規化器實例（KEEP_INPUT）
field_normalizer = FieldNormalizer()


def normalize_country(value: Optional[str]) -> str:
    return field_normalizer.country(value)


def normalize_state(value: Optional[str], country: Optional[str]) -> str:
    return field_normalizer.state(value, country)


def phone_number(value: Optional[str], country: Optional[str]) -> str:
    return field_normalizer.phone(value, country)
