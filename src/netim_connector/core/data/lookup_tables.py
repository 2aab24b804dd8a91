"""
正規化用的參考資料

國家別名、各國州別名、國際電話區碼。國碼、州代碼與名稱來自 pycountry（ISO 3166），
額外別名來自 countries / states 模組。在 import 時建立一次，之後唯讀並以參照共用。
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

import phonenumbers
import pycountry
import structlog

from src.netim_connector.core.data.countries import COUNTRY_ALIASES
from src.netim_connector.core.data.states import STATE_ALIASES, STATE_COUNTRIES
from src.netim_connector.core.utils.text_utils import fold

logger = structlog.get_logger()

_EMPTY: Mapping = MappingProxyType({})


@dataclass(frozen=True)
class LookupTables:
    """唯讀的國家 / 州 / 電話區碼對照表"""

    country_aliases: Mapping[str, Tuple[str, ...]]
    country_names: Mapping[str, str]
    state_aliases: Mapping[str, Mapping[str, Tuple[str, ...]]]
    state_names: Mapping[str, Mapping[str, str]]
    dialing_prefix: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    def states_for(self, country: str) -> Mapping[str, Tuple[str, ...]]:
        """取得某國的州別名表，沒有則回傳空表"""
        return self.state_aliases.get(country, _EMPTY)

    def state_name(self, country: str, code: str) -> Optional[str]:
        return self.state_names.get(country, _EMPTY).get(code)

    def prefix_for(self, country: str) -> Optional[str]:
        return self.dialing_prefix.get((country or "").upper())


def _alias_patterns(entry: Tuple[str, ...]) -> Tuple[str, ...]:
    """顯示名稱轉為跳脫過的 fold key，加上額外別名"""
    display_name, *extra = entry
    return (re.escape(fold(display_name)), *extra)


def _freeze(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


def _with_iso_names(display_name: str, iso_names: Iterable[Optional[str]],
                    extra: Tuple[str, ...]) -> Tuple[str, ...]:
    """(顯示名稱, 其他 ISO 名稱的跳脫 fold key..., 額外別名...)，重複的名稱只留一個"""
    seen = {fold(display_name)}
    patterns = []
    for name in iso_names:
        if not name:
            continue
        key = fold(name)
        if key not in seen:
            seen.add(key)
            patterns.append(re.escape(key))
    return (display_name, *patterns, *extra)


def _iso_countries() -> Dict[str, Tuple[str, ...]]:
    """pycountry 的 ISO 3166-1 國家，依國碼排序"""
    countries = {}
    for country in sorted(pycountry.countries, key=lambda c: c.alpha_2):
        # common_name 只有部分國家有（例如 Bolivia），其餘用正式簡稱
        display_name = getattr(country, "common_name", None) or country.name
        iso_names = (country.name, getattr(country, "official_name", None))
        countries[country.alpha_2] = _with_iso_names(
            display_name, iso_names, COUNTRY_ALIASES.get(country.alpha_2, ())
        )
    return countries


def _iso_states() -> Dict[str, Dict[str, Tuple[str, ...]]]:
    """pycountry 的 ISO 3166-2 第一層行政區，州代碼去掉國碼前綴（US-CA -> CA）"""
    states = {}
    for country_code in STATE_COUNTRIES:
        extra = STATE_ALIASES.get(country_code, {})
        subdivisions = pycountry.subdivisions.get(country_code=country_code) or []
        table = {}
        for subdivision in sorted(subdivisions, key=lambda s: s.code):
            if getattr(subdivision, "parent_code", None):
                continue
            code = subdivision.code.split("-", 1)[1]
            table[code] = (subdivision.name, *extra.get(code, ()))

        unknown = sorted(set(extra) - set(table))
        if unknown:
            logger.warning("State aliases without ISO subdivision", country=country_code, codes=unknown)
        states[country_code] = table
    return states


def _build_dialing_prefixes(countries) -> Dict[str, str]:
    prefixes = {}
    for code in countries:
        calling_code = phonenumbers.country_code_for_region(code)
        # phonenumbers 對沒有電話區碼的地區回傳 0
        if calling_code:
            prefixes[code] = str(calling_code)
    return prefixes


def build_lookup_tables(
    countries: Optional[Mapping[str, Tuple[str, ...]]] = None,
    states: Optional[Mapping[str, Mapping[str, Tuple[str, ...]]]] = None,
    dialing_prefix: Optional[Mapping[str, str]] = None,
) -> LookupTables:
    """
    建立對照表

    Args:
        countries: 國碼 -> (顯示名稱, 別名...)，預設由 pycountry 加上 COUNTRY_ALIASES 產生
        states: 國碼 -> (州代碼 -> (顯示名稱, 別名...))，預設由 pycountry 加上 STATE_ALIASES 產生
        dialing_prefix: 國碼 -> 區碼；預設由 phonenumbers 產生

    Returns:
        唯讀的 LookupTables
    """
    countries = _iso_countries() if countries is None else countries
    states = _iso_states() if states is None else states
    if dialing_prefix is None:
        dialing_prefix = _build_dialing_prefixes(countries)

    tables = LookupTables(
        country_aliases=_freeze({code: _alias_patterns(entry) for code, entry in countries.items()}),
        country_names=_freeze({code: entry[0] for code, entry in countries.items()}),
        state_aliases=_freeze({
            country: _freeze({code: _alias_patterns(entry) for code, entry in table.items()})
            for country, table in states.items()
        }),
        state_names=_freeze({
            country: _freeze({code: entry[0] for code, entry in table.items()})
            for country, table in states.items()
        }),
        dialing_prefix=_freeze(dialing_prefix),
    )

    logger.debug("Lookup tables built",
                 countries=len(tables.country_aliases),
                 state_tables=len(tables.state_aliases),
                 dialing_prefixes=len(tables.dialing_prefix))
    return tables


# 全域對照表（import 時建立一次）
DEFAULT_TABLES = build_lookup_tables()
