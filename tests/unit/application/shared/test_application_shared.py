"""Tests for the use-case boundary helpers."""

from workshop.application.shared import ActorContext, failure_from_exception
from workshop.domain.budgets.exceptions import BudgetNotFoundError
from workshop.domain.shared import UnexpectedDomainError, UserRole


class TestFailureFromException:
    """Tests for failure_from_exception."""

    def test_domain_exception_passes_through(self):
        """Test: a DomainException is returned unchanged."""
        error = BudgetNotFoundError("b-1")

        failure = failure_from_exception(error, "Budget approval failed")

        assert failure.error is error

    def test_other_exception_is_wrapped_with_cause(self):
        """Test: anything else becomes UnexpectedDomainError with a fixed message."""
        raw = KeyError("column")

        failure = failure_from_exception(raw, "Budget approval failed")

        assert isinstance(failure.error, UnexpectedDomainError)
        assert failure.error.message == "Budget approval failed"
        assert failure.error.context["error_type"] == "KeyError"
        assert failure.error.__cause__ is raw

    def test_non_exception_error_is_wrapped(self):
        """Test: a plain value error payload is wrapped without a cause."""
        failure = failure_from_exception("timeout", "Stock check failed")

        assert isinstance(failure.error, UnexpectedDomainError)
        assert failure.error.__cause__ is None


class TestActorContext:
    """Tests for ActorContext."""

    def test_system_actor(self):
        """Test: the system actor is an EMPLOYEE called "system"."""
        actor = ActorContext.system()

        assert actor.user_id == "system"
        assert actor.role == UserRole.EMPLOYEE
        assert actor.is_system is True
        assert ActorContext("u-1", UserRole.ADMIN).is_system is False
