"""Company domain service."""

import logging
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import Company
from bizdesk.domain.errors import ConflictError, NotFoundError, ValidationError, company_not_found

logger = logging.getLogger(__name__)


class CompanyService:
    """Service for managing tenant companies."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(self, name: str, country_code: Optional[str] = None) -> int:
        """Create a company.

        Args:
            name: Company name
            country_code: Optional ISO 3166 alpha-2 country code

        Returns:
            Company ID

        Raises:
            ValidationError: If the name is blank or the country code malformed
            ConflictError: If a company with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Company name is required")
        if country_code is not None:
            country_code = country_code.strip().upper()
            if len(country_code) != 2 or not country_code.isalpha():
                raise ValidationError(f"Invalid country code '{country_code}'")
        if self.db.get_company_by_name(name) is not None:
            raise ConflictError(f"Company with name '{name}' already exists")

        company_id = self.db.create_company(name=name, country_code=country_code)
        logger.info("Created company %s (%s)", company_id, name)
        return company_id

    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        return self.db.get_company(company_id)

    def require_company(self, company_id: int) -> Company:
        """Get company by ID or raise NotFoundError."""
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        return company

    def list_companies(self) -> list[Company]:
        """List all companies."""
        return self.db.list_companies()

