# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Domain exceptions for the Audit aggregate."""

from typing import Iterable, Optional, Sequence


class AuditDomainError(Exception):
    """Base exception for all audit domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class ResourceNotFoundError(AuditDomainError):
    """A referenced resource does not exist."""

    def __init__(
        self,
        resource: str,
        resource_id: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize not found error.

        Args:
            resource: Resource kind (Audit, User, Standard...).
            resource_id: Identifier that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"{resource} not found: {resource_id}",
            correlation_id=correlation_id
        )
        self.resource = resource
        self.resource_id = resource_id


class AuditNotFoundError(ResourceNotFoundError):
    """Audit does not exist or is inactive."""

    def __init__(self, audit_id: str, correlation_id: Optional[str] = None) -> None:
        super().__init__("Audit", audit_id, correlation_id=correlation_id)
        self.audit_id = audit_id


class UserNotFoundError(ResourceNotFoundError):
    """User does not exist in the user directory."""

    def __init__(self, user_id: str, correlation_id: Optional[str] = None) -> None:
        super().__init__("User", user_id, correlation_id=correlation_id)
        self.user_id = user_id


class StandardNotFoundError(ResourceNotFoundError):
    """One or more standards do not exist in the standards directory."""

    def __init__(
        self,
        standard_ids: Iterable[str],
        correlation_id: Optional[str] = None
    ) -> None:
        ids = sorted(str(standard_id) for standard_id in standard_ids)
        super().__init__("Standard", ", ".join(ids), correlation_id=correlation_id)
        self.standard_ids = ids


class EvaluationNotFoundError(ResourceNotFoundError):
    """Evaluation does not exist or is inactive."""

    def __init__(self, evaluation_id: str, correlation_id: Optional[str] = None) -> None:
        super().__init__("Evaluation", evaluation_id, correlation_id=correlation_id)
        self.evaluation_id = evaluation_id


class MaturityLevelNotFoundError(ResourceNotFoundError):
    """Maturity level does not exist."""

    def __init__(self, level_id: str, correlation_id: Optional[str] = None) -> None:
        super().__init__("MaturityLevel", level_id, correlation_id=correlation_id)
        self.level_id = level_id


class ForbiddenActionError(AuditDomainError):
    """Caller is not allowed to perform the action on the audit."""

    def __init__(
        self,
        audit_id: str,
        user_id: str,
        action: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize forbidden action error.

        Args:
            audit_id: Audit the action targeted.
            user_id: Acting user.
            action: Attempted action (e.g. "start", "configure weights").
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Only the lead auditor can {action} audit {audit_id} "
            f"(caller: {user_id})",
            correlation_id=correlation_id
        )
        self.audit_id = audit_id
        self.user_id = user_id
        self.action = action


class InvalidStateTransitionError(AuditDomainError):
    """Attempted state transition is not valid from the current state."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        from_state: str,
        command: str,
        required_states: Sequence[str],
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of entity (Audit or ActionPlan).
            entity_id: Identifier of the entity.
            from_state: Current state.
            command: Attempted command.
            required_states: States from which the command is accepted.
            correlation_id: Optional correlation ID for tracing.
        """
        required = ", ".join(required_states)
        super().__init__(
            f"Cannot {command} {entity_type} {entity_id} in state {from_state}; "
            f"required state: {required}",
            correlation_id=correlation_id
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.from_state = from_state
        self.command = command
        self.required_states = list(required_states)


class AuditValidationError(AuditDomainError):
    """Command input or aggregate state fails a business precondition."""


class AuditCannotBeClosedError(AuditValidationError):
    """One or more closure checks failed.

    Carries the detail a caller needs to explain why the audit cannot close.
    """

    def __init__(
        self,
        audit_id: str,
        reason: str,
        incomplete_count: int = 0,
        unclassified_count: int = 0,
        unremediated_evaluation_ids: Sequence[str] = (),
        has_evaluations: bool = True,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize closure blocked error.

        Args:
            audit_id: Audit that cannot be closed.
            reason: Human-readable explanation of the failed checks.
            incomplete_count: Active evaluations not completed.
            unclassified_count: Active evaluations without compliance status.
            unremediated_evaluation_ids: Major non-conformities lacking an
                approved or in-progress action plan.
            has_evaluations: False when the audit has no active evaluations.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Audit {audit_id} cannot be closed: {reason}",
            correlation_id=correlation_id
        )
        self.audit_id = audit_id
        self.reason = reason
        self.incomplete_count = incomplete_count
        self.unclassified_count = unclassified_count
        self.unremediated_evaluation_ids = list(unremediated_evaluation_ids)
        self.has_evaluations = has_evaluations

    def to_details(self) -> dict:
        """Return the failed-check breakdown as a plain dict."""
        return {
            "has_evaluations": self.has_evaluations,
            "incomplete_count": self.incomplete_count,
            "unclassified_count": self.unclassified_count,
            "unremediated_evaluation_ids": self.unremediated_evaluation_ids,
        }


class OptimisticLockError(AuditDomainError):
    """Version conflict detected during update."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        expected_version: int,
        actual_version: Optional[int],
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize optimistic lock error.

        Args:
            entity_type: Type of entity.
            entity_id: Identifier of the entity.
            expected_version: Version read before the mutation.
            actual_version: Current stored version, None if unknown.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Version conflict for {entity_type} {entity_id}: "
            f"expected {expected_version}, found {actual_version}",
            correlation_id=correlation_id
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
