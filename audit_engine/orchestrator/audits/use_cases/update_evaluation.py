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


"""UpdateEvaluation and CompleteEvaluation use case implementations."""

import logging

from audit_engine.core.audits.entities import Evaluation
from audit_engine.core.audits.exceptions import (
    AuditValidationError,
    EvaluationNotFoundError,
    MaturityLevelNotFoundError,
)
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.value_objects import EvaluationId

from ..commands import CompleteEvaluationCommand, UpdateEvaluationCommand
from ..dtos import EvaluationResponse
from .base import load_audit
from .update_progress import refresh_audit_metrics

logger = logging.getLogger(__name__)


def _load_evaluation(uow: UnitOfWork, evaluation_id: EvaluationId) -> Evaluation:
    evaluation = uow.evaluations.get(evaluation_id)
    if evaluation is None or not evaluation.is_active:
        raise EvaluationNotFoundError(str(evaluation_id))
    return evaluation


class UpdateEvaluationUseCase:
    """Use case for recording an evaluator's assessment.

    Assigning a maturity level copies its score and, unless the caller
    supplies them, its observations and recommendations. Evaluations are
    locked once the audit is closed or cancelled. The audit's progress and
    total score are refreshed in the same transaction.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: UpdateEvaluationCommand) -> EvaluationResponse:
        """Execute evaluation update.

        Raises:
            EvaluationNotFoundError: If the evaluation does not exist.
            AuditNotFoundError: If the owning audit does not exist.
            InvalidStateTransitionError: If the audit is closed or cancelled.
            MaturityLevelNotFoundError: If the maturity level does not exist.
            AuditValidationError: If the level belongs to another framework.
        """
        with self._uow as uow:
            evaluation = _load_evaluation(uow, command.evaluation_id)
            audit = load_audit(uow, evaluation.audit_id)
            audit.assert_evaluations_editable()

            if command.maturity_level_id is not None:
                level = uow.maturity_levels.get(command.maturity_level_id)
                if level is None:
                    raise MaturityLevelNotFoundError(str(command.maturity_level_id))
                if level.framework_id != audit.framework_id:
                    raise AuditValidationError(
                        f"Maturity level {level.level_id} does not belong to the "
                        f"audit framework"
                    )
                evaluation.assign_maturity_level(
                    level,
                    observations=command.observations,
                    recommendations=command.recommendations,
                )
            else:
                if command.observations is not None:
                    evaluation.observations = command.observations
                if command.recommendations is not None:
                    evaluation.recommendations = command.recommendations

            if command.compliance_status is not None:
                evaluation.classify(command.compliance_status)
            if command.findings is not None:
                evaluation.findings = command.findings
            if command.comments is not None:
                evaluation.comments = command.comments
            evaluation.record_evaluator(command.updated_by)

            uow.evaluations.save(evaluation)
            refresh_audit_metrics(uow, audit)
            uow.commit()

        logger.info("Evaluation %s updated by %s", evaluation.evaluation_id, command.updated_by)
        return EvaluationResponse.from_entity(evaluation)


class CompleteEvaluationUseCase:
    """Use case for marking an evaluation completed."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, command: CompleteEvaluationCommand) -> EvaluationResponse:
        """Execute evaluation completion.

        Raises:
            EvaluationNotFoundError: If the evaluation does not exist.
            InvalidStateTransitionError: If the audit is closed or cancelled.
            AuditValidationError: If no maturity level is assigned.
        """
        with self._uow as uow:
            evaluation = _load_evaluation(uow, command.evaluation_id)
            audit = load_audit(uow, evaluation.audit_id)
            audit.assert_evaluations_editable()

            evaluation.complete()
            evaluation.record_evaluator(command.completed_by)
            uow.evaluations.save(evaluation)
            refresh_audit_metrics(uow, audit)
            uow.commit()

        logger.info("Evaluation %s completed by %s",
                    evaluation.evaluation_id, command.completed_by)
        return EvaluationResponse.from_entity(evaluation)
