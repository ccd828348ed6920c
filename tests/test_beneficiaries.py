"""Tests for beneficiary handlers."""

import pytest

from banking_mock.exceptions import InvalidIdError, NotFoundError, ValidationError
from banking_mock.service import BankingService


def _fields(exc: ValidationError) -> list[str]:
    return [detail["field"] for detail in exc.details]


class TestListBeneficiaries:
    def test_seeded(self, service: BankingService) -> None:
        body = service.beneficiaries.list_beneficiaries({}).body

        assert len(body["beneficiaries"]) == 10
        assert body["pagination"]["totalRecords"] == 10
        assert "email" not in body["beneficiaries"][0]

    def test_filter_by_type(self, service: BankingService) -> None:
        body = service.beneficiaries.list_beneficiaries({"beneficiaryType": "BUSINESS"}).body
        assert all(b["beneficiaryType"] == "BUSINESS" for b in body["beneficiaries"])

    def test_filter_by_status(self, service: BankingService) -> None:
        assert service.beneficiaries.list_beneficiaries({"status": "INACTIVE"}).body["beneficiaries"] == []


class TestCreateBeneficiary:
    """Tests for create_beneficiary."""

    def test_created(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        response = service.beneficiaries.create_beneficiary(valid_beneficiary_body)

        assert response.status_code == 201
        body = response.body
        assert body["beneficiaryId"].startswith("ben-")
        assert body["name"] == "Jane Doe"
        assert body["nickname"] == "Jane Doe"
        assert body["accountNumber"] == "12345678"
        assert body["routingNumber"] == "401276"
        assert body["status"] == "ACTIVE"
        assert len(service.store.beneficiaries) == 11

    def test_optional_fields(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        body = {
            **valid_beneficiary_body,
            "nickname": "Jane",
            "email": "jane@example.com",
            "phone": "+447700900123",
            "bankAddress": {"city": "Leeds", "postalCode": "LS1 4AP"},
        }
        created = service.beneficiaries.create_beneficiary(body).body

        assert created["nickname"] == "Jane"
        assert created["email"] == "jane@example.com"
        assert created["phone"] == "+447700900123"
        assert created["bankAddress"]["city"] == "Leeds"
        assert created["bankAddress"]["postalCode"] == "LS1 4AP"
        assert created["bankAddress"]["country"] == "GB"

    def test_all_errors_reported_together(self, service: BankingService) -> None:
        body = {
            "beneficiaryType": "FRIEND",
            "accountNumber": "1234",
            "routingNumber": "12-34-56",
            "email": "not-an-email",
            "phone": "07700900123",
        }
        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.create_beneficiary(body)

        assert _fields(exc_info.value) == [
            "beneficiaryType",
            "name",
            "accountNumber",
            "routingNumber",
            "bankName",
            "email",
            "phone",
        ]
        assert len(service.store.beneficiaries) == 10

    def test_default_nickname_capped(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        name = "A" * 80
        created = service.beneficiaries.create_beneficiary({**valid_beneficiary_body, "name": name}).body

        assert created["name"] == name
        assert created["nickname"] == "A" * 50

    @pytest.mark.parametrize("body", [["x"], "x", 7])
    def test_body_must_be_object(self, service: BankingService, body) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.create_beneficiary(body)

        assert _fields(exc_info.value) == ["body"]
        assert len(service.store.beneficiaries) == 10

    def test_non_ascii_digits_rejected(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        body = {**valid_beneficiary_body, "accountNumber": "\u0661" * 8, "routingNumber": "401276\n"}
        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.create_beneficiary(body)
        assert _fields(exc_info.value) == ["accountNumber", "routingNumber"]

    def test_name_too_long(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.create_beneficiary({**valid_beneficiary_body, "name": "x" * 101})
        assert _fields(exc_info.value) == ["name"]

    def test_bank_address_must_be_object(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.create_beneficiary({**valid_beneficiary_body, "bankAddress": "Leeds"})
        assert _fields(exc_info.value) == ["bankAddress"]


class TestGetUpdateDelete:
    def _create(self, service: BankingService, body: dict) -> str:
        return service.beneficiaries.create_beneficiary(body).body["beneficiaryId"]

    def test_get(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        beneficiary_id = self._create(service, valid_beneficiary_body)
        assert service.beneficiaries.get_beneficiary(beneficiary_id).body["name"] == "Jane Doe"

    def test_get_unknown(self, service: BankingService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            service.beneficiaries.get_beneficiary("ben-missing")
        assert exc_info.value.code == "BENEFICIARY_NOT_FOUND"

    def test_malformed_id(self, service: BankingService) -> None:
        with pytest.raises(InvalidIdError) as exc_info:
            service.beneficiaries.get_beneficiary("beneficiary-1")
        assert exc_info.value.code == "INVALID_BENEFICIARY_ID"

    def test_update_contact_fields(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        beneficiary_id = self._create(service, valid_beneficiary_body)

        body = service.beneficiaries.update_beneficiary(
            beneficiary_id, {"nickname": "JD", "email": "jd@example.org", "name": "Ignored"}
        ).body

        assert body["nickname"] == "JD"
        assert body["email"] == "jd@example.org"
        assert body["name"] == "Jane Doe"

    def test_invalid_update_changes_nothing(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        beneficiary_id = self._create(service, valid_beneficiary_body)

        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.update_beneficiary(
                beneficiary_id, {"nickname": "JD", "phone": "12345"}
            )

        assert _fields(exc_info.value) == ["phone"]
        assert service.store.beneficiaries.get(beneficiary_id).nickname == "Jane Doe"

    def test_update_body_must_be_object(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        beneficiary_id = self._create(service, valid_beneficiary_body)

        with pytest.raises(ValidationError) as exc_info:
            service.beneficiaries.update_beneficiary(beneficiary_id, ["JD"])

        assert _fields(exc_info.value) == ["body"]

    def test_delete(self, service: BankingService, valid_beneficiary_body: dict) -> None:
        beneficiary_id = self._create(service, valid_beneficiary_body)

        response = service.beneficiaries.delete_beneficiary(beneficiary_id)

        assert response.status_code == 204
        assert response.body is None
        with pytest.raises(NotFoundError):
            service.beneficiaries.get_beneficiary(beneficiary_id)

    def test_delete_unknown(self, service: BankingService) -> None:
        with pytest.raises(NotFoundError):
            service.beneficiaries.delete_beneficiary("ben-missing")
