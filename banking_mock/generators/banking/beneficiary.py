"""Beneficiary generator for the banking domain."""

from banking_mock.generators.base import BaseGenerator
from banking_mock.models.base import BankAddress
from banking_mock.models.banking import Beneficiary, BeneficiaryStatus, BeneficiaryType


class BeneficiaryGenerator(BaseGenerator):
    """Generate synthetic beneficiaries.

    Individuals get a person's name, businesses a company name. Account
    numbers are 8 digits and routing numbers (sort codes) 6 digits.
    """

    ID_PREFIX = "ben-"

    BENEFICIARY_TYPES = list(BeneficiaryType)

    BANK_NAMES = ["Barclays Bank", "Lloyds Bank", "HSBC UK", "NatWest", "Santander UK"]

    def generate(
        self,
        beneficiary_id: str | None = None,
        beneficiary_type: BeneficiaryType | str | None = None,
    ) -> Beneficiary:
        """Generate a single beneficiary."""
        if beneficiary_type is None:
            ben_type = self.rng.choice(self.BENEFICIARY_TYPES)
        else:
            ben_type = BeneficiaryType(beneficiary_type)

        name = self.pool.name() if ben_type == BeneficiaryType.INDIVIDUAL else self.pool.company()
        created_at = self.past(365)

        return Beneficiary(
            beneficiary_id=beneficiary_id or self.new_id(),
            beneficiary_type=ben_type,
            name=name,
            nickname=name.split(" ")[0],
            account_number=self.digits(8),
            routing_number=self.digits(6),
            bank_name=self.rng.choice(self.BANK_NAMES),
            bank_address=BankAddress(
                street=self.pool.street(),
                city=self.pool.city(),
                state=self.pool.region(),
                postal_code=self.pool.postcode(),
            ),
            email=self.pool.email_for(name),
            phone=self.pool.uk_phone(),
            status=BeneficiaryStatus.ACTIVE,
            created_at=created_at,
            last_used=max(created_at, self.past(30)),
        )
