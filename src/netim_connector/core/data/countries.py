"""
國家額外別名（ISO 3166-1 alpha-2）

國碼、顯示名稱與 ISO 名稱由 pycountry 提供；這裡只列 ISO 資料沒有的
法文 / 當地語言名稱與常用英文簡稱。別名是已經 fold 過的正規表示式
（小寫、無重音、破折號轉空白、去逗號），比對時會整串錨定。
"""

COUNTRY_ALIASES = {
    "AD": ("andorre",),
    "AE": ("uae", "emirats arabes unis"),
    "AG": ("antigua( (and|&|et) barbuda)?",),
    "AL": ("albanie",),
    "AM": ("armenie",),
    "AQ": ("antarctique",),
    "AR": ("argentine",),
    "AS": ("samoa americaines",),
    "AT": ("autriche", "osterreich"),
    "AU": ("australie",),
    "AX": ("(iles )?aland",),
    "AZ": ("azerbaidjan",),
    "BA": ("bosnie herzegovine", "bosnia"),
    "BB": ("barbade",),
    "BE": ("belgique", "belgie", "belgien"),
    "BG": ("bulgarie",),
    "BH": ("bahrein",),
    "BL": ("st\\.? barthelemy", "st\\.? barth"),
    "BM": ("bermudes",),
    "BN": ("brunei",),
    "BO": ("bolivie",),
    "BQ": ("bonaire",),
    "BR": ("bresil", "brasil"),
    "BT": ("bhoutan",),
    "BV": ("(ile )?bouvet",),
    "BY": ("bielorussie",),
    "CC": ("(iles )?cocos",),
    "CD": ("democratic republic of the congo", "congo kinshasa", "rd congo", "drc",
           "republique democratique du congo"),
    "CF": ("republique centrafricaine",),
    "CG": ("congo brazzaville",),
    "CH": ("suisse", "schweiz", "svizzera"),
    "CI": ("ivory coast",),
    "CK": ("iles cook",),
    "CL": ("chili",),
    "CM": ("cameroun",),
    "CN": ("chine", "people's republic of china", "prc"),
    "CO": ("colombie",),
    "CV": ("cape verde", "cap vert"),
    "CX": ("ile christmas",),
    "CY": ("chypre",),
    "CZ": ("republique tcheque", "tchequie"),
    "DE": ("allemagne", "deutschland"),
    "DK": ("danemark", "danmark"),
    "DM": ("dominique",),
    "DO": ("republique dominicaine",),
    "DZ": ("algerie",),
    "EC": ("equateur",),
    "EE": ("estonie",),
    "EG": ("egypte",),
    "EH": ("sahara occidental",),
    "ER": ("erythree",),
    "ES": ("espagne", "espana"),
    "ET": ("ethiopie",),
    "FI": ("finlande", "suomi"),
    "FJ": ("fidji",),
    "FK": ("falkland islands", "falklands", "(iles )?malouines"),
    "FM": ("micronesia", "micronesie"),
    "FO": ("(iles )?feroe",),
    "FR": ("republique francaise",),
    "GB": ("uk", "u\\.k\\.", "great britain", "england", "scotland", "wales", "northern ireland",
           "royaume uni", "angleterre", "grande bretagne"),
    "GD": ("grenade",),
    "GE": ("georgie",),
    "GF": ("guyane( francaise)?",),
    "GG": ("guernesey",),
    "GL": ("groenland",),
    "GM": ("gambie",),
    "GN": ("guinee",),
    "GQ": ("guinee equatoriale",),
    "GR": ("grece", "hellas"),
    "GS": ("south georgia",),
    "GW": ("guinee bissau",),
    "HR": ("croatie", "hrvatska"),
    "HU": ("hongrie", "magyarorszag"),
    "ID": ("indonesie",),
    "IE": ("irlande", "eire"),
    "IM": ("ile de man",),
    "IN": ("inde",),
    "IQ": ("irak",),
    "IS": ("islande",),
    "IT": ("italie", "italia"),
    "JM": ("jamaique",),
    "JO": ("jordanie",),
    "JP": ("japon",),
    "KG": ("kirghizistan",),
    "KH": ("cambodge",),
    "KM": ("comores",),
    "KN": ("st\\.? kitts( (and|&) nevis)?",),
    "KP": ("coree du nord",),
    "KR": ("korea", "republic of korea", "coree( du sud)?"),
    "KW": ("koweit",),
    "KY": ("iles caimans",),
    "LB": ("liban",),
    "LC": ("st\\.? lucia", "sainte lucie"),
    "LT": ("lituanie",),
    "LU": ("luxemburg",),
    "LV": ("lettonie",),
    "LY": ("libye",),
    "MA": ("maroc",),
    "MD": ("moldavie",),
    "MF": ("saint martin", "st\\.? martin"),
    "MH": ("iles marshall",),
    "MK": ("macedonia", "macedoine( du nord)?"),
    "MM": ("burma", "birmanie"),
    "MN": ("mongolie",),
    "MO": ("macau",),
    "MP": ("iles mariannes du nord",),
    "MR": ("mauritanie",),
    "MT": ("malte",),
    "MU": ("(ile )?maurice",),
    "MX": ("mexique",),
    "MY": ("malaisie",),
    "NA": ("namibie",),
    "NC": ("nouvelle caledonie",),
    "NF": ("ile norfolk",),
    "NL": ("the netherlands", "holland", "pays bas", "nederland"),
    "NO": ("norvege", "norge"),
    "NZ": ("nouvelle zelande",),
    "PE": ("perou",),
    "PF": ("polynesie francaise",),
    "PG": ("papouasie nouvelle guinee",),
    "PL": ("pologne", "polska"),
    "PM": ("st\\.? pierre( et| and)? miquelon",),
    "PR": ("porto rico",),
    "PS": ("palestine",),
    "RE": ("la reunion",),
    "RO": ("roumanie",),
    "RS": ("serbie",),
    "RU": ("russia", "russie"),
    "SA": ("arabie saoudite",),
    "SB": ("iles salomon",),
    "SD": ("soudan",),
    "SE": ("suede", "sverige"),
    "SG": ("singapour",),
    "SH": ("saint helena", "sainte helene"),
    "SI": ("slovenie",),
    "SJ": ("svalbard",),
    "SK": ("slovaquie",),
    "SM": ("saint marin",),
    "SO": ("somalie",),
    "SS": ("soudan du sud",),
    "ST": ("sao tome",),
    "SV": ("salvador",),
    "SX": ("sint maarten",),
    "SY": ("syrie",),
    "SZ": ("swaziland",),
    "TC": ("turks( (and|&) caicos)?",),
    "TD": ("tchad",),
    "TF": ("terres australes francaises",),
    "TH": ("thailande",),
    "TJ": ("tadjikistan",),
    "TL": ("east timor",),
    "TN": ("tunisie",),
    "TR": ("turkey", "turquie"),
    "TT": ("trinidad", "trinite et tobago"),
    "TZ": ("tanzanie",),
    "UG": ("ouganda",),
    "US": ("usa", "u\\.s\\.a\\.?", "u\\.s\\.", "america", "etats unis( d'amerique)?"),
    "UZ": ("ouzbekistan",),
    "VA": ("vatican city", "vatican", "holy see"),
    "VC": ("st\\.? vincent",),
    "VG": ("iles vierges britanniques",),
    "VI": ("u\\.?s\\.? virgin islands", "iles vierges des etats unis"),
    "WF": ("wallis( et futuna)?",),
    "ZA": ("afrique du sud",),
    "ZM": ("zambie",),
}
