"""Company resource."""

from freshdesk_sdk.models import Company, CompanyCreate
from freshdesk_sdk.resources._base import BaseResource


class CompaniesResource(BaseResource):
    """Manage companies."""

    def all(self) -> list[Company]:
        """Fetch every company, following pagination to the end."""
        return self._list_all(self._endpoints.companies_all, Company)

    def create(self, company: CompanyCreate) -> Company:
        return self._create(self._endpoints.companies_create, company, Company)

    def update(self, company_id: int, company: CompanyCreate) -> Company:
        return self._update(self._endpoints.companies_update(company_id), company, Company)
