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


"""Action plan entity attached to an Evaluation."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from ..exceptions import AuditValidationError, InvalidStateTransitionError
from ..value_objects import ActionPlanId, ActionPlanStatus, EvaluationId, UserId


@dataclass
class ActionPlan:
    """Remediation commitment tied to one evaluation's finding.

    Its status machine is independent of the audit lifecycle; the audit
    only reads the current status when checking remediation coverage.

    Attributes:
        action_plan_id: Unique action plan identifier.
        evaluation_id: Evaluation whose finding is remediated.
        description: What will be done.
        responsible_id: User accountable for the plan.
        due_date: Commitment date.
        status: Current remediation state.
        rejection_reason: Reason given when rejected.
        version: Optimistic locking version.
    """

    action_plan_id: ActionPlanId
    evaluation_id: EvaluationId
    description: str
    responsible_id: Optional[UserId] = None
    due_date: Optional[date] = None
    status: ActionPlanStatus = ActionPlanStatus.DRAFT
    approved_by: Optional[UserId] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    completed_at: Optional[datetime] = None
    verified_by: Optional[UserId] = None
    verified_at: Optional[datetime] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 1

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def _validate_transition(
        self,
        allowed_states: set[ActionPlanStatus],
        command: str
    ) -> None:
        """Validate the command is accepted from the current status.

        Raises:
            InvalidStateTransitionError: If transition invalid.
        """
        if self.status not in allowed_states:
            raise InvalidStateTransitionError(
                entity_type="ActionPlan",
                entity_id=str(self.action_plan_id),
                from_state=self.status.value,
                command=command,
                required_states=sorted(state.value for state in allowed_states),
            )

    def _update_metadata(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
        self.version += 1

    def submit(self) -> None:
        """DRAFT -> PENDING_APPROVAL."""
        self._validate_transition({ActionPlanStatus.DRAFT}, "submit")
        self.status = ActionPlanStatus.PENDING_APPROVAL
        self._update_metadata()

    def approve(self, approved_by: UserId) -> None:
        """PENDING_APPROVAL -> APPROVED."""
        self._validate_transition({ActionPlanStatus.PENDING_APPROVAL}, "approve")
        self.status = ActionPlanStatus.APPROVED
        self.approved_by = approved_by
        self.approved_at = datetime.now(timezone.utc)
        self._update_metadata()

    def reject(self, reason: str) -> None:
        """PENDING_APPROVAL -> REJECTED.

        Raises:
            AuditValidationError: If reason is blank.
        """
        self._validate_transition({ActionPlanStatus.PENDING_APPROVAL}, "reject")
        if not reason or not reason.strip():
            raise AuditValidationError("A rejection reason is required")
        self.status = ActionPlanStatus.REJECTED
        self.rejection_reason = reason.strip()
        self._update_metadata()

    def start(self) -> None:
        """APPROVED -> IN_PROGRESS."""
        self._validate_transition({ActionPlanStatus.APPROVED}, "start")
        self.status = ActionPlanStatus.IN_PROGRESS
        self._update_metadata()

    def complete(self) -> None:
        """IN_PROGRESS -> COMPLETED."""
        self._validate_transition({ActionPlanStatus.IN_PROGRESS}, "complete")
        self.status = ActionPlanStatus.COMPLETED
        self.completed_at = datetime.now(timezone.utc)
        self._update_metadata()

    def verify(self, verified_by: UserId, approved: bool) -> None:
        """COMPLETED -> VERIFIED, or back to IN_PROGRESS when not approved."""
        self._validate_transition({ActionPlanStatus.COMPLETED}, "verify")
        self.verified_by = verified_by
        self.verified_at = datetime.now(timezone.utc)
        self.status = (
            ActionPlanStatus.VERIFIED if approved else ActionPlanStatus.IN_PROGRESS
        )
        self._update_metadata()

    def close(self) -> None:
        """VERIFIED -> CLOSED."""
        self._validate_transition({ActionPlanStatus.VERIFIED}, "close")
        self.status = ActionPlanStatus.CLOSED
        self._update_metadata()

    def mark_overdue(self) -> None:
        """APPROVED or IN_PROGRESS -> OVERDUE once the due date has passed."""
        self._validate_transition(
            {ActionPlanStatus.APPROVED, ActionPlanStatus.IN_PROGRESS},
            "mark_overdue"
        )
        self.status = ActionPlanStatus.OVERDUE
        self._update_metadata()

    def is_overdue_on(self, today: date) -> bool:
        """Check if the plan has passed its due date while still open."""
        return (
            self.due_date is not None
            and today > self.due_date
            and self.status in {ActionPlanStatus.APPROVED, ActionPlanStatus.IN_PROGRESS}
        )

    def covers_remediation(self) -> bool:
        return self.is_active and self.status.covers_remediation()
