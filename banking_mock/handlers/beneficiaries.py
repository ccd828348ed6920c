"""Beneficiary resource handlers."""

import logging
import re
from dataclasses import replace
from typing import Any, Mapping

from banking_mock.config import MockBankConfig
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.handlers.base import (
    ApiResponse,
    FieldErrors,
    check_id,
    json_response,
    lookup,
    no_content,
    request_body,
)
from banking_mock.models.base import BankAddress
from banking_mock.models.banking import Beneficiary, BeneficiaryType
from banking_mock.query import CollectionSpec, run_query
from banking_mock.serialization import dataclass_to_dict, pick
from banking_mock.store.memory import BankingDataStore

logger = logging.getLogger(__name__)

BENEFICIARY_ID_RE = re.compile(r"^ben-[A-Za-z0-9-]+$")
ACCOUNT_NUMBER_RE = re.compile(r"^[0-9]{8}$")
ROUTING_NUMBER_RE = re.compile(r"^[0-9]{6}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^\+[0-9]{10,15}$")

MAX_NAME_LENGTH = 100
MAX_NICKNAME_LENGTH = 50

BENEFICIARY_TYPES = {t.value for t in BeneficiaryType}

BENEFICIARIES = CollectionSpec(
    exact=(
        ("beneficiaryType", "beneficiary_type"),
        ("status", "status"),
    )
)

SUMMARY_FIELDS = (
    "beneficiary_id",
    "beneficiary_type",
    "name",
    "nickname",
    "account_number",
    "bank_name",
    "status",
    "created_at",
)

ADDRESS_FIELDS = {
    "street": "street",
    "city": "city",
    "state": "state",
    "postalCode": "postal_code",
    "country": "country",
}


class BeneficiaryHandler:
    """CRUD endpoints for saved payees.

    Deletion is unconditional: payments are not checked for references to
    the beneficiary being removed.
    """

    def __init__(
        self,
        store: BankingDataStore,
        generators: MockDataGenerators,
        config: MockBankConfig,
    ) -> None:
        self.store = store
        self.generators = generators
        self.config = config

    def list_beneficiaries(self, query: Mapping[str, Any] | None = None) -> ApiResponse:
        """GET /beneficiaries"""
        result = run_query(
            self.store.beneficiaries.list(), query or {}, BENEFICIARIES, self.config.pagination
        )
        return json_response(
            {
                "beneficiaries": [pick(ben, *SUMMARY_FIELDS) for ben in result.items],
                "pagination": dataclass_to_dict(result.pagination),
            }
        )

    def create_beneficiary(self, body: Mapping[str, Any] | None) -> ApiResponse:
        """POST /beneficiaries

        Optional fields that are not supplied keep generated values, except
        ``nickname`` which defaults to ``name``.
        """
        body = request_body(body)
        errors = FieldErrors()

        beneficiary_type = errors.required_text(
            body, "beneficiaryType", "Beneficiary type is required"
        )
        if beneficiary_type is not None and beneficiary_type not in BENEFICIARY_TYPES:
            errors.add(
                "beneficiaryType",
                f"Beneficiary type must be one of {', '.join(sorted(BENEFICIARY_TYPES))}",
            )
            beneficiary_type = None

        name = errors.required_text(body, "name", "Name is required", max_length=MAX_NAME_LENGTH)

        account_number = errors.required_text(body, "accountNumber", "Account number is required")
        if account_number is not None and not ACCOUNT_NUMBER_RE.fullmatch(account_number):
            errors.add("accountNumber", "Account number must be exactly 8 digits")

        routing_number = errors.required_text(body, "routingNumber", "Routing number is required")
        if routing_number is not None and not ROUTING_NUMBER_RE.fullmatch(routing_number):
            errors.add("routingNumber", "Routing number must be exactly 6 digits")

        bank_name = errors.required_text(body, "bankName", "Bank name is required")

        bank_address = body.get("bankAddress")
        if bank_address is not None and not isinstance(bank_address, Mapping):
            errors.add("bankAddress", "Bank address must be an object")
            bank_address = None

        nickname, email, phone = self._contact_fields(body, errors)

        errors.raise_if_any()

        beneficiary = self.generators.beneficiaries.generate(beneficiary_type=beneficiary_type)
        beneficiary = replace(
            beneficiary,
            name=name,
            nickname=nickname or name[:MAX_NICKNAME_LENGTH],
            account_number=account_number,
            routing_number=routing_number,
            bank_name=bank_name,
            bank_address=self._merge_address(beneficiary.bank_address, bank_address),
            email=email or beneficiary.email,
            phone=phone or beneficiary.phone,
        )
        self.store.beneficiaries.add(beneficiary)
        logger.info("Created beneficiary %s", beneficiary.beneficiary_id)

        return json_response(dataclass_to_dict(beneficiary), status_code=201)

    def get_beneficiary(self, beneficiary_id: str) -> ApiResponse:
        """GET /beneficiaries/{beneficiaryId}"""
        return json_response(dataclass_to_dict(self._beneficiary(beneficiary_id)))

    def update_beneficiary(
        self, beneficiary_id: str, body: Mapping[str, Any] | None
    ) -> ApiResponse:
        """PUT /beneficiaries/{beneficiaryId}

        Only ``nickname``, ``email`` and ``phone`` can change. Nothing is
        written unless every supplied field is valid.
        """
        beneficiary = self._beneficiary(beneficiary_id)
        errors = FieldErrors()
        nickname, email, phone = self._contact_fields(request_body(body), errors)
        errors.raise_if_any()

        if nickname:
            beneficiary.nickname = nickname
        if email:
            beneficiary.email = email
        if phone:
            beneficiary.phone = phone

        return json_response(dataclass_to_dict(beneficiary))

    def delete_beneficiary(self, beneficiary_id: str) -> ApiResponse:
        """DELETE /beneficiaries/{beneficiaryId}"""
        self._beneficiary(beneficiary_id)
        self.store.beneficiaries.delete(beneficiary_id)
        logger.info("Deleted beneficiary %s", beneficiary_id)
        return no_content()

    def _beneficiary(self, beneficiary_id: str) -> Beneficiary:
        check_id(
            beneficiary_id,
            BENEFICIARY_ID_RE,
            "INVALID_BENEFICIARY_ID",
            "Invalid beneficiary ID format. Expected prefix: ben-",
        )
        return lookup(self.store.beneficiaries, beneficiary_id, "BENEFICIARY_NOT_FOUND")

    @staticmethod
    def _contact_fields(
        body: Mapping[str, Any], errors: FieldErrors
    ) -> tuple[str | None, str | None, str | None]:
        nickname = errors.optional_text(body, "nickname", max_length=MAX_NICKNAME_LENGTH)
        email = errors.optional_text(body, "email", EMAIL_RE, "Email must be a valid email address")
        phone = errors.optional_text(
            body, "phone", PHONE_RE, "Phone must start with + followed by 10 to 15 digits"
        )
        return nickname, email, phone

    @staticmethod
    def _merge_address(generated: BankAddress, supplied: Mapping[str, Any] | None) -> BankAddress:
        if not supplied:
            return generated
        changes = {
            attribute: str(supplied[key])
            for key, attribute in ADDRESS_FIELDS.items()
            if supplied.get(key)
        }
        return replace(generated, **changes)
