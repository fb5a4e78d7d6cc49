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


"""UpdateProgress use case implementation."""

import logging

from audit_engine.core.audits.entities import Audit
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.services import compute_progress

from ..commands import UpdateProgressCommand
from ..dtos import AuditResponse
from .base import load_audit

logger = logging.getLogger(__name__)


def refresh_audit_metrics(uow: UnitOfWork, audit: Audit) -> None:
    """Recompute progress and total score inside the caller's unit of work."""
    progress, total_score = compute_progress(
        uow.evaluations.find_active_by_audit(audit.audit_id)
    )
    audit.apply_metrics(progress, total_score)
    uow.audits.save_metrics(audit)
    logger.debug(
        "Audit %s metrics: progress=%s total_score=%s",
        audit.audit_id, progress, total_score,
    )


class UpdateProgressUseCase:
    """Use case for recomputing an audit's progress and total score.

    Idempotent; concurrent runs overwrite each other with the same values
    derived from the committed evaluation set.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: UpdateProgressCommand) -> AuditResponse:
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id)
            refresh_audit_metrics(uow, audit)
            uow.commit()
        return AuditResponse.from_entity(audit)
