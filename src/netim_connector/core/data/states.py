"""
州 / 省額外別名（依國碼分組）

州代碼與顯示名稱由 pycountry 的 ISO 3166-2 資料提供（去掉國碼前綴），
只有 STATE_COUNTRIES 內的國家做州正規化。這裡只列 ISO 資料沒有的縮寫、
舊名與法文名稱，格式與 countries.COUNTRY_ALIASES 相同。
"""

STATE_COUNTRIES = ("US", "CA", "AU", "BR", "MX", "IN")

STATE_ALIASES = {
    "US": {
        "CA": ("calif\\.?", "californie"),
        "DC": ("washington d\\.?c\\.?", "d\\.c\\."),
        "FL": ("floride",),
        "GA": ("georgie",),
        "LA": ("louisiane",),
        "MA": ("mass\\.?",),
        "NM": ("nouveau mexique",),
        "NY": ("new york state",),
        "NC": ("caroline du nord",),
        "ND": ("dakota du nord",),
        "PA": ("pennsylvanie",),
        "PR": ("porto rico",),
        "SC": ("caroline du sud",),
        "SD": ("dakota du sud",),
        "VA": ("virginie",),
        "VI": ("u\\.?s\\.? virgin islands",),
        "WA": ("washington state",),
        "WV": ("virginie occidentale",),
    },
    "CA": {
        "BC": ("colombie britannique",),
        "NB": ("nouveau brunswick",),
        "NL": ("newfoundland", "terre neuve( et labrador)?"),
        "NS": ("nouvelle ecosse",),
        "NT": ("territoires du nord ouest",),
        "PE": ("pei", "ile du prince edouard"),
        "QC": ("que\\.?", "pq"),
    },
    "AU": {
        "NSW": ("nouvelle galles du sud",),
        "TAS": ("tasmanie",),
    },
    "MX": {
        "CMX": ("mexico city", "cdmx"),
        "COA": ("coahuila",),
        "MEX": ("estado de mexico", "state of mexico"),
        "MIC": ("michoacan",),
        "VER": ("veracruz",),
    },
    "IN": {
        "DL": ("new delhi",),
        "OD": ("orissa",),
        "PY": ("pondicherry",),
        "UK": ("uttaranchal",),
    },
}
