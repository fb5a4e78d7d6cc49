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


"""RequestClosure use case implementation."""

import logging

from audit_engine.core.audits.exceptions import AuditCannotBeClosedError
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.services import ClosureValidator, compute_closure_statistics
from audit_engine.core.audits.value_objects import AuditCommand

from ..commands import RequestClosureCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class RequestClosureUseCase:
    """Use case for requesting closure (IN_PROGRESS -> PENDING_CLOSURE).

    The closure checks run before the transition and fresh statistics are
    stored as provisional closure metadata. Final closure still needs an
    explicit approval.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: RequestClosureCommand) -> AuditResponse:
        """Execute closure request.

        Raises:
            AuditNotFoundError: If the audit does not exist.
            InvalidStateTransitionError: If the audit is not IN_PROGRESS.
            ForbiddenActionError: If caller is not the lead auditor.
            AuditCannotBeClosedError: If a closure check fails.
        """
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.assert_transition(AuditCommand.REQUEST_CLOSURE)
            audit.assert_lead_auditor(command.requested_by, "request closure of")

            validator = ClosureValidator(uow.evaluations, uow.action_plans)
            try:
                evaluations = validator.validate_closure(audit.audit_id)
            except AuditCannotBeClosedError as exc:
                logger.warning("Closure request rejected for audit %s: %s",
                               audit.audit_id, exc.reason)
                raise

            audit.request_closure(
                requested_by=command.requested_by,
                statistics=compute_closure_statistics(evaluations),
                report_url=command.report_url,
            )
            uow.audits.save(audit)
            uow.commit()

        logger.info("Closure requested for audit %s", audit.audit_id)
        return AuditResponse.from_entity(audit)
