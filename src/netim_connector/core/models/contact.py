from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from src.netim_connector.core.services.field_normalizers import FieldNormalizer, field_normalizer
from src.netim_connector.core.utils.text_utils import special_character


class BodyForm(str, Enum):
    """聯絡人類型"""

    IND = "IND"  # 個人
    ORG = "ORG"  # 組織


class Language(str, Enum):
    EN = "EN"
    FR = "FR"


class RawContact(BaseModel):
    """呼叫端提供的原始聯絡人資料（自由文字）"""

    first_name: Optional[str] = Field(None, description="名")
    last_name: Optional[str] = Field(None, description="姓")
    body_name: Optional[str] = Field(None, description="組織名稱")
    address1: Optional[str] = Field(None, description="地址第一行")
    address2: Optional[str] = Field(None, description="地址第二行")
    zip_code: Optional[str] = Field(None, description="郵遞區號")
    state: Optional[str] = Field(None, description="州 / 省")
    city: Optional[str] = Field(None, description="城市")
    country: Optional[str] = Field(None, description="國家（代碼或名稱）")
    phone: Optional[str] = Field(None, description="電話號碼")
    fax: Optional[str] = Field(None, description="傳真")
    email: Optional[str] = Field(None, description="電子郵件")
    language: Optional[str] = Field(None, description="EN / FR")
    is_owner: int = Field(0, description="是否為網域持有人")

    # 選填欄位
    tm_name: Optional[str] = Field(None, description="商標名稱")
    tm_number: Optional[str] = Field(None, description="商標號碼")
    tm_type: Optional[str] = Field(None, description="商標註冊處")
    tm_date: Optional[str] = Field(None, description="商標日期")
    company_number: Optional[str] = Field(None, description="公司登記號碼")
    vat_number: Optional[str] = Field(None, description="VAT 號碼")
    birth_date: Optional[str] = Field(None, description="出生日期")
    birth_zip_code: Optional[str] = Field(None, description="出生地郵遞區號")
    birth_city: Optional[str] = Field(None, description="出生城市")
    birth_country: Optional[str] = Field(None, description="出生國家")
    id_number: Optional[str] = Field(None, description="身分證號碼")
    additional: Dict[str, Any] = Field(default_factory=dict, description="各網域後綴需要的額外資料")


class Contact(BaseModel):
    """NETIM StructContact（欄位順序即 API 傳輸順序）"""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    body_form: str = Field(BodyForm.IND.value, alias="bodyForm")
    body_name: str = Field("", alias="bodyName")
    address1: str = Field("", alias="address1")
    address2: str = Field("", alias="address2")
    zip_code: str = Field("", alias="zipCode")
    area: str = Field("", alias="area")
    city: str = Field("", alias="city")
    country: str = Field("", alias="country")
    phone: str = Field("", alias="phone")
    fax: str = Field("", alias="fax")
    email: str = Field("", alias="email")
    language: str = Field(Language.EN.value, alias="language")
    is_owner: int = Field(0, alias="isOwner")
    tm_name: str = Field("", alias="tmName")
    tm_number: str = Field("", alias="tmNumber")
    tm_type: str = Field("", alias="tmType")
    tm_date: str = Field("", alias="tmDate")
    company_number: str = Field("", alias="companyNumber")
    vat_number: str = Field("", alias="vatNumber")
    birth_date: str = Field("", alias="birthDate")
    birth_zip_code: str = Field("", alias="birthZipCode")
    birth_city: str = Field("", alias="birthCity")
    birth_country: str = Field("", alias="birthCountry")
    id_number: str = Field("", alias="idNumber")
    additional: Dict[str, Any] = Field(default_factory=dict, alias="additional")

    def to_api(self) -> Dict[str, Any]:
        """轉為 API 使用的 dict（camelCase，固定順序）"""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_api(cls, record: Any) -> "Contact":
        """
        由 API 回傳的聯絡人資料建立 Contact

        record 可以是 dict 或有屬性的物件；未知欄位與 None 值會被忽略。
        """
        data = record if isinstance(record, Mapping) else vars(record)
        wire_names = {field.alias or name for name, field in cls.model_fields.items()}
        return cls.model_validate({
            key: value for key, value in data.items()
            if key in wire_names and value is not None
        })


class NormalizedContact(Contact):
    """
    已正規化的聯絡人

    透過 set_* 修改欄位時會重新執行對應的正規化。
    set_country 不會回頭重新正規化州與電話，需由呼叫端自行處理。
    """

    _normalizer: FieldNormalizer = PrivateAttr(default_factory=lambda: field_normalizer)

    def bind(self, normalizer: FieldNormalizer) -> "NormalizedContact":
        self._normalizer = normalizer
        return self

    def set_first_name(self, first_name: str) -> "NormalizedContact":
        self.first_name = special_character(first_name)
        return self

    def set_last_name(self, last_name: str) -> "NormalizedContact":
        self.last_name = special_character(last_name)
        return self

    def set_body_name(self, body_name: str) -> "NormalizedContact":
        self.body_name = special_character(body_name)
        self.body_form = (BodyForm.ORG if self.body_name.strip() else BodyForm.IND).value
        return self

    def set_address1(self, address1: str) -> "NormalizedContact":
        self.address1 = special_character(address1)
        return self

    def set_address2(self, address2: str) -> "NormalizedContact":
        self.address2 = special_character(address2)
        return self

    def set_city(self, city: str) -> "NormalizedContact":
        self.city = special_character(city)
        return self

    def set_country(self, country: str) -> "NormalizedContact":
        self.country = self._normalizer.country(country)
        return self

    def set_state(self, state: str) -> "NormalizedContact":
        self.area = self._normalizer.state(state, self.country)
        return self

    def set_phone(self, phone: str) -> "NormalizedContact":
        self.phone = self._normalizer.phone(phone, self.country)
        return self

    def set_fax(self, fax: str) -> "NormalizedContact":
        self.fax = self._normalizer.phone(fax, self.country)
        return self

    def set_language(self, language: Optional[str]) -> "NormalizedContact":
        self.language = resolve_language(language).value
        return self


def resolve_language(language: Optional[str]) -> Language:
    """只有明確指定 FR 時才使用法文，其餘一律 EN"""
    return Language.FR if (language or "").strip().upper() == Language.FR.value else Language.EN
