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


"""Value objects for the Audit domain.

All value objects are immutable and defined by their values, not identity.
"""

import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import ClassVar, Union


@dataclass(frozen=True)
class EntityId:
    """UUID identifier shared by every entity in the audit domain.

    Attributes:
        value: Canonical lower-case string form of the UUID.

    Raises:
        ValueError: If value is not a valid UUID or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 36

    def __post_init__(self) -> None:
        """Validate and canonicalize the UUID string."""
        if not isinstance(self.value, str):
            raise ValueError(f"{type(self).__name__} must be a string")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"{type(self).__name__} length cannot exceed {self.MAX_LENGTH} "
                f"characters, got {len(self.value)}"
            )
        try:
            canonical = str(uuid.UUID(self.value))
        except ValueError as exc:
            raise ValueError(
                f"Invalid UUID format for {type(self).__name__}: {self.value}"
            ) from exc
        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class AuditId(EntityId):
    """Identifier of an Audit aggregate."""


class EvaluationId(EntityId):
    """Identifier of an Evaluation."""


class ActionPlanId(EntityId):
    """Identifier of an ActionPlan."""


class StandardId(EntityId):
    """Identifier of a template Standard."""


class StandardWeightId(EntityId):
    """Identifier of a StandardWeight record."""


class UserId(EntityId):
    """Identifier of a user (auditor, lead auditor, approver)."""


class TemplateId(EntityId):
    """Identifier of an audit Template."""


class FrameworkId(EntityId):
    """Identifier of a maturity/scoring Framework."""


class OrganizationId(EntityId):
    """Identifier of the audited Organization."""


class MaturityLevelId(EntityId):
    """Identifier of a MaturityLevel."""


class AuditStatus(str, Enum):
    """Audit lifecycle states.

    Terminal states (CLOSED, CANCELLED) cannot transition.
    """

    DRAFT = "draft"
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    PENDING_CLOSURE = "pending_closure"
    CLOSED = "closed"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if state is terminal (immutable).

        Returns:
            True if state is CLOSED or CANCELLED.
        """
        return self in {AuditStatus.CLOSED, AuditStatus.CANCELLED}


class AuditCommand(str, Enum):
    """Lifecycle commands accepted by the Audit aggregate."""

    PLAN = "plan"
    START = "start"
    REQUEST_CLOSURE = "request_closure"
    APPROVE_CLOSURE = "approve_closure"
    CLOSE = "close"
    CANCEL = "cancel"


class AuditType(str, Enum):
    """Kind of audit engagement."""

    INITIAL = "initial"
    FOLLOW_UP = "follow_up"
    RECERTIFICATION = "recertification"


class ComplianceStatus(str, Enum):
    """Classification of an evaluation outcome."""

    CONFORMING = "conforming"
    MINOR_NON_CONFORMITY = "minor_non_conformity"
    MAJOR_NON_CONFORMITY = "major_non_conformity"
    OBSERVATION = "observation"
    NOT_APPLICABLE = "not_applicable"

    def is_non_conformity(self) -> bool:
        """Check if the outcome is a minor or major non-conformity."""
        return self in {
            ComplianceStatus.MINOR_NON_CONFORMITY,
            ComplianceStatus.MAJOR_NON_CONFORMITY,
        }


class ActionPlanStatus(str, Enum):
    """Action plan remediation states.

    CLOSED is terminal. Only APPROVED and IN_PROGRESS count as remediation
    coverage for a major non-conformity.
    """

    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    VERIFIED = "verified"
    CLOSED = "closed"
    OVERDUE = "overdue"

    def is_terminal(self) -> bool:
        """Check if state is terminal."""
        return self == ActionPlanStatus.CLOSED

    def covers_remediation(self) -> bool:
        """Check if a plan in this state counts as remediation coverage."""
        return self in {ActionPlanStatus.APPROVED, ActionPlanStatus.IN_PROGRESS}


class NormalizationMode(str, Enum):
    """How submitted standard weights are scaled before persistence."""

    AUTO = "auto"
    MANUAL = "manual"


class WeightSource(str, Enum):
    """Where copied weights are taken from."""

    TEMPLATE = "template"
    PREVIOUS_AUDIT = "previous_audit"


TWO_PLACES = Decimal("0.01")
WEIGHT_PLACES = Decimal("0.0001")


def to_decimal(value: Union[Decimal, float, int, str]) -> Decimal:
    """Convert a numeric input to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round2(value: Union[Decimal, float, int, str]) -> Decimal:
    """Round half-up to two decimal places."""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def round_weight(value: Union[Decimal, float, int, str]) -> Decimal:
    """Round half-up to the four decimal places weights are stored with."""
    return to_decimal(value).quantize(WEIGHT_PLACES, rounding=ROUND_HALF_UP)
