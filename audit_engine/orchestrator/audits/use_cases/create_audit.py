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


"""CreateAudit use case implementation."""

import logging
from typing import List

from audit_engine.core.audits.entities import Audit, Evaluation
from audit_engine.core.audits.exceptions import (
    AuditNotFoundError,
    AuditValidationError,
    UserNotFoundError,
)
from audit_engine.core.audits.repositories import IdGenerator, UnitOfWork
from audit_engine.core.audits.value_objects import (
    AuditId,
    AuditType,
    ComplianceStatus,
    EvaluationId,
)

from ..commands import CreateAuditCommand
from ..dtos import AuditResponse

logger = logging.getLogger(__name__)

_FOLLOW_UP_STATUSES = (
    ComplianceStatus.MINOR_NON_CONFORMITY,
    ComplianceStatus.MAJOR_NON_CONFORMITY,
)


class CreateAuditUseCase:
    """Use case for creating a draft audit with its evaluations.

    Initial and recertification audits get one evaluation per auditable
    standard of the template. Follow-up audits get one evaluation per
    non-conformity found in their closed parent audit, linked back through
    ``previous_evaluation_id``.
    """

    def __init__(self, uow: UnitOfWork, id_generator: IdGenerator) -> None:
        """Initialize use case with dependencies.

        Args:
            uow: Unit of work giving transactional access to repositories.
            id_generator: Generator for audit and evaluation identifiers.
        """
        self._uow = uow
        self._id_generator = id_generator

    def execute(self, command: CreateAuditCommand) -> AuditResponse:
        """Execute audit creation.

        Args:
            command: CreateAudit command with audit details.

        Returns:
            AuditResponse DTO with the created draft audit.

        Raises:
            AuditValidationError: If the name is blank or the follow-up
                parent is not usable.
            UserNotFoundError: If the lead auditor does not exist.
            AuditNotFoundError: If the follow-up parent does not exist.
        """
        if not command.name or not command.name.strip():
            raise AuditValidationError("Audit name is required")

        with self._uow as uow:
            if not uow.users.exists(command.lead_auditor_id):
                raise UserNotFoundError(str(command.lead_auditor_id))

            audit = Audit(
                audit_id=AuditId(str(self._id_generator.generate())),
                name=command.name.strip(),
                template_id=command.template_id,
                framework_id=command.framework_id,
                organization_id=command.organization_id,
                lead_auditor_id=command.lead_auditor_id,
                start_date=command.start_date,
                audit_type=command.audit_type,
                description=command.description,
                parent_audit_id=command.parent_audit_id,
            )

            if command.audit_type == AuditType.FOLLOW_UP:
                evaluations = self._follow_up_evaluations(uow, audit)
            else:
                evaluations = self._template_evaluations(uow, audit)

            uow.audits.add(audit)
            uow.evaluations.save_all(evaluations)
            uow.commit()

        logger.info(
            "Audit %s created by %s with %d evaluations",
            audit.audit_id,
            command.created_by,
            len(evaluations),
        )
        return AuditResponse.from_entity(audit)

    def _new_evaluation_id(self) -> EvaluationId:
        return EvaluationId(str(self._id_generator.generate()))

    def _template_evaluations(self, uow: UnitOfWork, audit: Audit) -> List[Evaluation]:
        standards = uow.standards.find_auditable_by_template(audit.template_id)
        return [
            Evaluation(
                evaluation_id=self._new_evaluation_id(),
                audit_id=audit.audit_id,
                standard_id=standard.standard_id,
            )
            for standard in standards
        ]

    def _follow_up_evaluations(self, uow: UnitOfWork, audit: Audit) -> List[Evaluation]:
        """Derive follow-up evaluations from the parent audit's findings."""
        if audit.parent_audit_id is None:
            raise AuditValidationError("Follow-up audits require a parent audit")

        parent = uow.audits.get(audit.parent_audit_id)
        if parent is None:
            raise AuditNotFoundError(str(audit.parent_audit_id))
        if not parent.is_closed():
            raise AuditValidationError(
                f"Parent audit {parent.audit_id} must be closed to create a follow-up"
            )
        if (parent.template_id != audit.template_id
                or parent.framework_id != audit.framework_id):
            raise AuditValidationError(
                "Follow-up audits must use the parent audit's template and framework"
            )

        findings = uow.evaluations.find_by_audit_and_status(
            parent.audit_id, _FOLLOW_UP_STATUSES
        )
        if not findings:
            raise AuditValidationError(
                f"Parent audit {parent.audit_id} has no non-conformities to follow up"
            )
        return [
            Evaluation(
                evaluation_id=self._new_evaluation_id(),
                audit_id=audit.audit_id,
                standard_id=finding.standard_id,
                previous_evaluation_id=finding.evaluation_id,
            )
            for finding in findings
        ]
