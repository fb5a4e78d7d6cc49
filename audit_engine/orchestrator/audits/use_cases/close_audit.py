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


"""CloseAudit use case implementation."""

import logging

from audit_engine.core.audits.exceptions import AuditCannotBeClosedError
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.services import ClosureValidator, compute_closure_statistics
from audit_engine.core.audits.value_objects import AuditCommand

from ..commands import CloseAuditCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class CloseAuditUseCase:
    """Use case for final closure (PENDING_CLOSURE -> CLOSED).

    Closure is irreversible, so every check is re-run against the current
    evaluation set instead of trusting the result from the closure request.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: CloseAuditCommand) -> AuditResponse:
        """Execute audit closure.

        Raises:
            AuditNotFoundError: If the audit does not exist.
            InvalidStateTransitionError: If the audit is not PENDING_CLOSURE.
            ForbiddenActionError: If caller is not the lead auditor.
            AuditValidationError: If the closure was not approved.
            AuditCannotBeClosedError: If a closure check fails.
        """
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.assert_transition(AuditCommand.CLOSE)
            audit.assert_lead_auditor(command.closed_by, "close")
            audit.assert_closure_approved()

            validator = ClosureValidator(uow.evaluations, uow.action_plans)
            try:
                evaluations = validator.validate_closure(audit.audit_id)
            except AuditCannotBeClosedError as exc:
                logger.warning("Closure rejected for audit %s: %s",
                               audit.audit_id, exc.reason)
                raise

            audit.close(
                closed_by=command.closed_by,
                statistics=compute_closure_statistics(evaluations),
                report_url=command.report_url,
            )
            uow.audits.save(audit)
            uow.commit()

        logger.info("Audit %s closed by %s", audit.audit_id, command.closed_by)
        return AuditResponse.from_entity(audit)
