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


"""ApproveClosure use case implementation."""

import logging

from audit_engine.core.audits.repositories import UnitOfWork

from ..commands import ApproveClosureCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class ApproveClosureUseCase:
    """Use case for stamping closure approval on a PENDING_CLOSURE audit.

    The status does not change; the stamp is the human checkpoint that
    CloseAudit requires.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: ApproveClosureCommand) -> AuditResponse:
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.approve_closure(command.approved_by)
            uow.audits.save(audit)
            uow.commit()

        logger.info("Closure of audit %s approved by %s",
                    audit.audit_id, command.approved_by)
        return AuditResponse.from_entity(audit)
