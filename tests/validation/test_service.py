"""Tests for ValidationService."""

from unittest.mock import Mock

from propchain.examples import PERSON_CHECKS, Person
from propchain.validation.accessors import attr
from propchain.validation.chain import Check
from propchain.validation.service import ValidationService


class TestValidationService:
    """Tests for ValidationService orchestration."""

    def test_validate_success(self, adult):
        service = ValidationService(PERSON_CHECKS)
        chain = service.validate(adult)

        assert chain.is_valid()
        assert len(chain) == 2
        assert chain.subject is adult

    def test_validate_all_preserves_order(self, adult, nameless_minor):
        service = ValidationService(PERSON_CHECKS)
        chains = service.validate_all([adult, nameless_minor])

        assert [c.subject for c in chains] == [adult, nameless_minor]
        assert chains[0].is_valid()
        assert not chains[1].is_valid()
        assert service.has_errors(chains)

    def test_has_errors_false_when_all_valid(self, adult):
        service = ValidationService(PERSON_CHECKS)
        chains = service.validate_all([adult, Person(name="Bob", age=18)])

        assert not service.has_errors(chains)

    def test_checks_run_for_each_subject(self):
        predicate = Mock(return_value=True)
        service = ValidationService([Check(attr("Age", "age"), predicate, "x")])

        service.validate_all([Person("A", 1), Person("B", 2)])

        assert predicate.call_count == 2

    def test_checks_from_generator_reused(self, adult, nameless_minor):
        service = ValidationService(item for item in PERSON_CHECKS)

        chains = service.validate_all([adult, nameless_minor])

        assert [len(c) for c in chains] == [2, 2]
        assert chains[0].is_valid()
        assert not chains[1].is_valid()

    def test_accumulate_all_mode(self, nameless_minor):
        service = ValidationService(PERSON_CHECKS, stop_on_first_failure=False)
        chain = service.validate(nameless_minor)

        assert len(chain.failures()) == 2


class TestFormatting:
    """Tests for report formatting."""

    def test_format_error_report(self, nameless_minor):
        service = ValidationService(PERSON_CHECKS, stop_on_first_failure=False)
        chain = service.validate(nameless_minor)

        report = service.format_error_report(chain)

        assert report == "Name: Name cannot be empty\nAge: Must be 18+"

    def test_format_error_report_empty_when_valid(self, adult):
        service = ValidationService(PERSON_CHECKS)
        assert service.format_error_report(service.validate(adult)) == ""

    def test_format_results(self, nameless_minor):
        service = ValidationService(PERSON_CHECKS)
        chain = service.validate(nameless_minor)

        assert service.format_results(chain) == (
            "[FAIL] Name: Name cannot be empty\n[SKIP] Age"
        )
