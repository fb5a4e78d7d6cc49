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


"""PlanAudit use case implementation."""

import logging

from audit_engine.core.audits.exceptions import (
    AuditValidationError,
    ForbiddenActionError,
    UserNotFoundError,
)
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.value_objects import AuditCommand

from ..commands import PlanAuditCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class PlanAuditUseCase:
    """Use case for planning a draft audit (DRAFT -> PLANNED).

    Planning guarantees:
    - Only the designated lead auditor can plan
    - The lead auditor and every team member resolve to existing users
    - At least one auditor besides the lead is assigned
    - The schedule ends after it starts and the scope is not blank
    """

    def __init__(self, uow: UnitOfWork) -> None:
        """Initialize use case with its unit of work.

        Args:
            uow: Unit of work giving transactional access to repositories.
        """
        self._uow = uow

    def execute(self, command: PlanAuditCommand) -> AuditResponse:
        """Execute audit planning.

        Args:
            command: PlanAudit command with schedule, team and scope.

        Returns:
            AuditResponse DTO with the planned audit.

        Raises:
            AuditNotFoundError: If the audit does not exist.
            InvalidStateTransitionError: If the audit is not DRAFT.
            ForbiddenActionError: If caller is not the designated lead auditor.
            UserNotFoundError: If the lead auditor does not exist.
            AuditValidationError: On bad dates, team or scope.
        """
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.assert_transition(AuditCommand.PLAN)

            if command.planned_by != command.lead_auditor_id:
                raise ForbiddenActionError(
                    audit_id=str(command.audit_id),
                    user_id=str(command.planned_by),
                    action="plan",
                )

            if not uow.users.exists(command.lead_auditor_id):
                raise UserNotFoundError(str(command.lead_auditor_id))

            team = [
                member for member in command.auditor_ids
                if member != command.lead_auditor_id
            ]
            existing = uow.users.find_existing(team)
            unresolved = [member for member in team if member not in existing]
            if unresolved:
                raise AuditValidationError(
                    "Some auditors were not found: "
                    + ", ".join(sorted(str(member) for member in set(unresolved)))
                )

            audit.plan(
                lead_auditor_id=command.lead_auditor_id,
                audit_team_ids=team,
                start_date=command.scheduled_start_date,
                end_date=command.scheduled_end_date,
                scope=command.scope,
                organization_id=command.organization_id,
            )
            uow.audits.save(audit)
            uow.commit()

        logger.info("Audit %s planned by %s", audit.audit_id, command.planned_by)
        return AuditResponse.from_entity(audit)
