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


"""Audit aggregate root entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..exceptions import (
    AuditValidationError,
    ForbiddenActionError,
    InvalidStateTransitionError,
)
from ..value_objects import (
    AuditCommand,
    AuditId,
    AuditStatus,
    AuditType,
    FrameworkId,
    OrganizationId,
    TemplateId,
    UserId,
)
from .metadata import CancellationMetadata, ClosureMetadata, ClosureStatistics


_NON_TERMINAL = frozenset(
    status for status in AuditStatus if not status.is_terminal()
)

# command -> (states the command is accepted from, resulting state)
TRANSITIONS: Dict[AuditCommand, Tuple[FrozenSet[AuditStatus], AuditStatus]] = {
    AuditCommand.PLAN: (frozenset({AuditStatus.DRAFT}), AuditStatus.PLANNED),
    AuditCommand.START: (frozenset({AuditStatus.PLANNED}), AuditStatus.IN_PROGRESS),
    AuditCommand.REQUEST_CLOSURE: (
        frozenset({AuditStatus.IN_PROGRESS}),
        AuditStatus.PENDING_CLOSURE,
    ),
    AuditCommand.APPROVE_CLOSURE: (
        frozenset({AuditStatus.PENDING_CLOSURE}),
        AuditStatus.PENDING_CLOSURE,
    ),
    AuditCommand.CLOSE: (frozenset({AuditStatus.PENDING_CLOSURE}), AuditStatus.CLOSED),
    AuditCommand.CANCEL: (_NON_TERMINAL, AuditStatus.CANCELLED),
}

WEIGHT_CONFIGURABLE_STATES = frozenset({AuditStatus.DRAFT, AuditStatus.PLANNED})


def _status_order(status: AuditStatus) -> int:
    return list(AuditStatus).index(status)


@dataclass
class Audit:
    """Audit aggregate root.

    Owns the lifecycle state machine of an audit engagement. Every lifecycle
    command is validated against ``TRANSITIONS`` before any mutation, and
    each successful command bumps ``version`` for optimistic locking.

    Attributes:
        audit_id: Unique audit identifier.
        name: Display name.
        template_id: Template whose standards are evaluated.
        framework_id: Scoring/maturity framework.
        organization_id: Audited organization.
        lead_auditor_id: Lead auditor in charge of the lifecycle.
        start_date: Scheduled start.
        audit_type: Initial, follow-up or recertification.
        status: Current lifecycle state.
        audit_team_ids: Additional auditors.
        scope: Audit scope, required once planned.
        end_date: Scheduled or actual end.
        parent_audit_id: Closed audit a follow-up derives from.
        total_score: Mean score of completed evaluations.
        progress: Percentage of completed evaluations.
        closure_metadata: Provisional or final closure record.
        closure_approved_at: Approval stamp required before close.
        closure_approved_by: Approving user.
        cancellation_metadata: Cancellation record.
        is_active: Soft delete flag.
        version: Optimistic locking version.
    """

    audit_id: AuditId
    name: str
    template_id: TemplateId
    framework_id: FrameworkId
    organization_id: OrganizationId
    lead_auditor_id: UserId
    start_date: date
    audit_type: AuditType = AuditType.INITIAL
    status: AuditStatus = AuditStatus.DRAFT
    audit_team_ids: List[UserId] = field(default_factory=list)
    scope: Optional[str] = None
    description: Optional[str] = None
    end_date: Optional[date] = None
    parent_audit_id: Optional[AuditId] = None
    total_score: Decimal = Decimal("0")
    progress: Decimal = Decimal("0")
    closure_metadata: Optional[ClosureMetadata] = None
    closure_approved_at: Optional[datetime] = None
    closure_approved_by: Optional[UserId] = None
    cancellation_metadata: Optional[CancellationMetadata] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 1

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def assert_transition(self, command: AuditCommand) -> AuditStatus:
        """Validate ``command`` is accepted from the current state.

        Args:
            command: Lifecycle command about to be applied.

        Returns:
            The state the audit will be in after the command.

        Raises:
            InvalidStateTransitionError: If the command is not accepted from
                the current state.
        """
        allowed_states, target_state = TRANSITIONS[command]
        if self.status not in allowed_states:
            raise InvalidStateTransitionError(
                entity_type="Audit",
                entity_id=str(self.audit_id),
                from_state=self.status.value,
                command=command.value,
                required_states=[
                    state.value
                    for state in sorted(allowed_states, key=_status_order)
                ],
            )
        return target_state

    def assert_lead_auditor(self, user_id: UserId, action: str) -> None:
        """Raise ForbiddenActionError unless ``user_id`` is the lead auditor."""
        if self.lead_auditor_id != user_id:
            raise ForbiddenActionError(
                audit_id=str(self.audit_id),
                user_id=str(user_id),
                action=action,
            )

    def assert_weights_configurable(self) -> None:
        """Raise InvalidStateTransitionError unless weights may be replaced."""
        if self.status not in WEIGHT_CONFIGURABLE_STATES:
            raise InvalidStateTransitionError(
                entity_type="Audit",
                entity_id=str(self.audit_id),
                from_state=self.status.value,
                command="configure_weights",
                required_states=[
                    state.value
                    for state in sorted(WEIGHT_CONFIGURABLE_STATES, key=_status_order)
                ],
            )

    def assert_evaluations_editable(self) -> None:
        """Raise InvalidStateTransitionError once findings are locked."""
        if self.status.is_terminal():
            raise InvalidStateTransitionError(
                entity_type="Audit",
                entity_id=str(self.audit_id),
                from_state=self.status.value,
                command="update_evaluation",
                required_states=[
                    state.value
                    for state in sorted(_NON_TERMINAL, key=_status_order)
                ],
            )

    def _update_metadata(self) -> None:
        """Update timestamp and version after state change."""
        self.updated_at = datetime.now(timezone.utc)
        self.version += 1

    def plan(
        self,
        lead_auditor_id: UserId,
        audit_team_ids: Sequence[UserId],
        start_date: date,
        end_date: date,
        scope: str,
        organization_id: Optional[OrganizationId] = None,
    ) -> None:
        """Transition audit from DRAFT to PLANNED.

        Raises:
            InvalidStateTransitionError: If not in DRAFT state.
            AuditValidationError: If dates, team or scope are invalid.
        """
        target = self.assert_transition(AuditCommand.PLAN)
        if start_date >= end_date:
            raise AuditValidationError("End date must be after start date")
        team = _dedupe(member for member in audit_team_ids if member != lead_auditor_id)
        if not team:
            raise AuditValidationError(
                "At least one additional auditor must be assigned to the team"
            )
        if not scope or not scope.strip():
            raise AuditValidationError("Audit scope is required")

        self.lead_auditor_id = lead_auditor_id
        self.audit_team_ids = team
        self.start_date = start_date
        self.end_date = end_date
        self.scope = scope.strip()
        if organization_id is not None:
            self.organization_id = organization_id
        self.status = target
        self._update_metadata()

    def start(self, started_by: UserId) -> None:
        """Transition audit from PLANNED to IN_PROGRESS.

        Raises:
            InvalidStateTransitionError: If not in PLANNED state.
            ForbiddenActionError: If caller is not the lead auditor.
        """
        target = self.assert_transition(AuditCommand.START)
        self.assert_lead_auditor(started_by, "start")
        self.status = target
        self._update_metadata()

    def request_closure(
        self,
        requested_by: UserId,
        statistics: ClosureStatistics,
        report_url: Optional[str] = None,
    ) -> None:
        """Transition audit from IN_PROGRESS to PENDING_CLOSURE.

        Stores provisional closure metadata; ``closed_at`` holds the request
        time until the audit is closed.
        """
        target = self.assert_transition(AuditCommand.REQUEST_CLOSURE)
        self.assert_lead_auditor(requested_by, "request closure of")
        self.closure_metadata = ClosureMetadata(
            closed_at=datetime.now(timezone.utc),
            closed_by=requested_by,
            statistics=statistics,
            report_url=report_url,
        )
        self.status = target
        self._update_metadata()

    def approve_closure(self, approved_by: UserId) -> None:
        """Stamp closure approval; status stays PENDING_CLOSURE."""
        self.assert_transition(AuditCommand.APPROVE_CLOSURE)
        self.assert_lead_auditor(approved_by, "approve closure of")
        self.closure_approved_at = datetime.now(timezone.utc)
        self.closure_approved_by = approved_by
        self._update_metadata()

    def assert_closure_approved(self) -> None:
        if self.closure_approved_at is None:
            raise AuditValidationError(
                "The lead auditor must approve the closure before closing the audit"
            )

    def close(
        self,
        closed_by: UserId,
        statistics: ClosureStatistics,
        report_url: Optional[str] = None,
    ) -> None:
        """Transition audit from PENDING_CLOSURE to CLOSED.

        Raises:
            InvalidStateTransitionError: If not in PENDING_CLOSURE state.
            ForbiddenActionError: If caller is not the lead auditor.
            AuditValidationError: If closure was not approved.
        """
        target = self.assert_transition(AuditCommand.CLOSE)
        self.assert_lead_auditor(closed_by, "close")
        self.assert_closure_approved()
        now = datetime.now(timezone.utc)
        if report_url is None and self.closure_metadata is not None:
            report_url = self.closure_metadata.report_url
        self.closure_metadata = ClosureMetadata(
            closed_at=now,
            closed_by=closed_by,
            statistics=statistics,
            report_url=report_url,
        )
        if self.end_date is None:
            self.end_date = now.date()
        self.status = target
        self._update_metadata()

    def cancel(self, cancelled_by: UserId, reason: str, elevated: bool = False) -> None:
        """Transition audit to CANCELLED from any non-terminal state.

        Args:
            cancelled_by: Acting user.
            reason: Mandatory cancellation reason.
            elevated: True when the caller holds an elevated role and may
                cancel without being the lead auditor.

        Raises:
            InvalidStateTransitionError: If already CLOSED or CANCELLED.
            ForbiddenActionError: If caller is neither lead nor elevated.
            AuditValidationError: If reason is blank.
        """
        target = self.assert_transition(AuditCommand.CANCEL)
        if not elevated:
            self.assert_lead_auditor(cancelled_by, "cancel")
        if not reason or not reason.strip():
            raise AuditValidationError("A cancellation reason is required")

        self.cancellation_metadata = CancellationMetadata(
            cancelled_at=datetime.now(timezone.utc),
            cancelled_by=cancelled_by,
            reason=reason.strip(),
            previous_status=self.status,
        )
        self.closure_metadata = None
        self.closure_approved_at = None
        self.closure_approved_by = None
        self.status = target
        self._update_metadata()

    def apply_metrics(self, progress: Decimal, total_score: Decimal) -> None:
        """Overwrite the denormalized evaluation metrics.

        Does not bump ``version``: the metrics are a pure function of the
        evaluation set and are written last-writer-wins.
        """
        self.progress = progress
        self.total_score = total_score
        self.updated_at = datetime.now(timezone.utc)

    def is_closed(self) -> bool:
        """Check if audit is in CLOSED state."""
        return self.status == AuditStatus.CLOSED

    def is_cancelled(self) -> bool:
        """Check if audit is in CANCELLED state."""
        return self.status == AuditStatus.CANCELLED


def _dedupe(user_ids) -> List[UserId]:
    seen = set()
    result = []
    for user_id in user_ids:
        if user_id not in seen:
            seen.add(user_id)
            result.append(user_id)
    return result
