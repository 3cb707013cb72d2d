"""Tests for jm_common.enums — all enum values must match DB CHECK constraints."""

from src.jm_common.enums import (
    ALL_CATEGORIES,
    ApplicationStatus,
    EngagementKind,
    JobCategory,
    JobStatus,
    NegotiationStatus,
    TransactionType,
    UserRole,
    WithdrawalStatus,
)


class TestAllEnumsAreStr:
    def test_values_compare_as_strings(self) -> None:
        assert UserRole.FINDER == "finder"
        assert JobStatus.CANCELLED == "cancelled"
        assert EngagementKind.NEGOTIATION == "negotiation"
        assert isinstance(TransactionType.WITHDRAWAL, str)


class TestStatusSets:
    def test_application_uses_approved(self) -> None:
        assert {s.value for s in ApplicationStatus} == {"pending", "approved", "rejected"}

    def test_negotiation_uses_accepted(self) -> None:
        assert {s.value for s in NegotiationStatus} == {"pending", "accepted", "rejected"}

    def test_job_status(self) -> None:
        assert {s.value for s in JobStatus} == {"active", "completed", "cancelled"}

    def test_withdrawal_status(self) -> None:
        assert WithdrawalStatus.PENDING.value == "pending"
        assert len(WithdrawalStatus) == 4


class TestCategories:
    def test_slugs_are_lowercase_and_hyphenated(self) -> None:
        for c in JobCategory:
            assert c.value == c.value.lower()
            assert " " not in c.value
        assert JobCategory.HOTEL_CARE.value == "hotel-care"

    def test_all_sentinel_is_not_a_category(self) -> None:
        assert ALL_CATEGORIES not in {c.value for c in JobCategory}
