"""聯絡人正規化服務"""

from typing import Optional

import structlog

from simple_config import settings
from src.netim_connector.core.data.lookup_tables import LookupTables
from src.netim_connector.core.models.contact import (
    BodyForm,
    Contact,
    NormalizedContact,
    RawContact,
    resolve_language,
)
from src.netim_connector.core.services.field_normalizers import FallbackPolicy, FieldNormalizer
from src.netim_connector.core.utils.text_utils import special_character

logger = structlog.get_logger()


class ContactNormalizer:
    """把 RawContact 轉為 NETIM API 可接受的 NormalizedContact"""

    def __init__(
        self,
        tables: Optional[LookupTables] = None,
        fallback: FallbackPolicy = FallbackPolicy.KEEP_INPUT,
    ):
        self.fields = FieldNormalizer(tables, fallback)

    def normalize(self, raw: RawContact, country_hint: Optional[str] = None) -> NormalizedContact:
        """
        正規化聯絡人

        順序：先正規化國家，州與電話再依正規化後的國家處理。

        Args:
            raw: 原始聯絡人資料
            country_hint: raw.country 為空時使用的國家

        Returns:
            NormalizedContact（set_* 會使用同一個 FieldNormalizer）
        """
        country = self.fields.country(raw.country or country_hint)
        body_name = special_character(raw.body_name)

        contact = NormalizedContact(
            first_name=special_character(raw.first_name),
            last_name=special_character(raw.last_name),
            body_form=(BodyForm.ORG if body_name.strip() else BodyForm.IND).value,
            body_name=body_name,
            address1=special_character(raw.address1),
            address2=special_character(raw.address2),
            zip_code=raw.zip_code or "",
            area=self.fields.state(raw.state, country),
            city=special_character(raw.city),
            country=country,
            phone=self.fields.phone(raw.phone, country),
            fax=self.fields.phone(raw.fax, country),
            email=raw.email or "",
            language=resolve_language(raw.language).value,
            is_owner=raw.is_owner,
            tm_name=raw.tm_name or "",
            tm_number=raw.tm_number or "",
            tm_type=raw.tm_type or "",
            tm_date=raw.tm_date or "",
            company_number=raw.company_number or "",
            vat_number=raw.vat_number or "",
            birth_date=raw.birth_date or "",
            birth_zip_code=raw.birth_zip_code or "",
            birth_city=raw.birth_city or "",
            birth_country=raw.birth_country or "",
            id_number=raw.id_number or "",
            additional=dict(raw.additional),
        ).bind(self.fields)

        logger.debug("Contact normalized",
                     country=contact.country,
                     area=contact.area,
                     body_form=contact.body_form,
                     language=contact.language)
        return contact

    def denormalize(self, contact: Contact) -> Contact:
        """
        顯示 / 匯出用：州代碼轉回顯示名稱

        電話與文字清理不會還原。
        """
        data = contact.model_dump()
        data["area"] = self.fields.denormalize_state(contact.area, contact.country)
        return Contact(**data)


def create_contact_normalizer(
    tables: Optional[LookupTables] = None,
    fallback: Optional[FallbackPolicy] = None,
) -> ContactNormalizer:
    """依設定建立 ContactNormalizer（fallback 預設取自 settings.normalization_fallback）"""
    if fallback is None:
        fallback = FallbackPolicy(settings.normalization_fallback)
    return ContactNormalizer(tables=tables, fallback=fallback)


# 全域聯絡人正規化器
contact_normalizer = create_contact_normalizer()
