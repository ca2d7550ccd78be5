"""Resource owner value object for a QuickBooks Online company."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QuickBooksCompany:
    """
    A QuickBooks company, built from a CompanyInfo API response.

    CompanyInfo does not include the realm id, so it is carried alongside
    the response.
    """

    response: dict = field(repr=False)
    realm_id: str | None = None

    def get_id(self) -> str | None:
        return self.realm_id

    @property
    def company_info(self) -> dict:
        return self.response.get("CompanyInfo") or {}

    @property
    def company_name(self) -> str:
        return self.company_info.get("CompanyName", "")

    @property
    def legal_name(self) -> str:
        return self.company_info.get("LegalName", "")

    @property
    def email(self) -> str:
        return (self.company_info.get("Email") or {}).get("Address", "")

    @property
    def country(self) -> str:
        return self.company_info.get("Country", "")

    def to_dict(self) -> dict:
        return {
            "id": self.realm_id,
            "company_name": self.company_name,
            "legal_name": self.legal_name,
            "email": self.email,
            "country": self.country,
            "company_info": self.company_info,
        }
