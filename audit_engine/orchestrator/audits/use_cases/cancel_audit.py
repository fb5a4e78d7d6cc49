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


"""CancelAudit use case implementation."""

import logging

from audit_engine.core.audits.repositories import UnitOfWork

from ..commands import CancelAuditCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class CancelAuditUseCase:
    """Use case for cancelling an audit from any non-terminal state.

    Cancellation outranks a pending closure; the status the audit was
    cancelled from is kept in the cancellation metadata.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: CancelAuditCommand) -> AuditResponse:
        """Execute audit cancellation.

        Raises:
            AuditNotFoundError: If the audit does not exist.
            InvalidStateTransitionError: If the audit is CLOSED or CANCELLED.
            ForbiddenActionError: If caller is neither lead nor elevated.
            AuditValidationError: If the reason is blank.
        """
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.cancel(
                cancelled_by=command.cancelled_by,
                reason=command.cancellation_reason,
                elevated=command.elevated,
            )
            uow.audits.save(audit)
            uow.commit()

        logger.info(
            "Audit %s cancelled by %s (was %s)",
            audit.audit_id,
            command.cancelled_by,
            audit.cancellation_metadata.previous_status.value,
        )
        return AuditResponse.from_entity(audit)
