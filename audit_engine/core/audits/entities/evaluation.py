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


"""Evaluation entity within the Audit aggregate."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from ..exceptions import AuditValidationError
from ..value_objects import (
    AuditId,
    ComplianceStatus,
    EvaluationId,
    MaturityLevelId,
    StandardId,
    UserId,
)
from .references import MaturityLevel


@dataclass
class Evaluation:
    """Assessment of one standard within one audit.

    Attributes:
        evaluation_id: Unique evaluation identifier.
        audit_id: Owning audit.
        standard_id: Evaluated standard.
        maturity_level_id: Assigned maturity level, if any.
        compliance_status: Outcome classification, None until classified.
        score: Score copied from the assigned maturity level.
        is_completed: True once the evaluator closes the evaluation.
        previous_evaluation_id: Parent-audit evaluation for follow-ups.
        is_active: Soft deactivation flag; evaluations are never deleted.
    """

    evaluation_id: EvaluationId
    audit_id: AuditId
    standard_id: StandardId
    maturity_level_id: Optional[MaturityLevelId] = None
    compliance_status: Optional[ComplianceStatus] = None
    score: Decimal = Decimal("0")
    is_completed: bool = False
    previous_evaluation_id: Optional[EvaluationId] = None
    observations: Optional[str] = None
    recommendations: Optional[str] = None
    findings: Optional[str] = None
    comments: Optional[str] = None
    evaluated_by: Optional[UserId] = None
    evaluated_at: Optional[datetime] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def assign_maturity_level(
        self,
        level: MaturityLevel,
        observations: Optional[str] = None,
        recommendations: Optional[str] = None,
    ) -> None:
        """Assign a maturity level, copying its score and default texts.

        Caller-supplied observations/recommendations win over the level's
        predefined texts.
        """
        self.maturity_level_id = level.level_id
        self.score = level.score
        self.observations = observations or level.observations or self.observations
        self.recommendations = (
            recommendations or level.recommendations or self.recommendations
        )
        self._touch()

    def classify(self, status: Optional[ComplianceStatus]) -> None:
        self.compliance_status = status
        self._touch()

    def record_evaluator(self, evaluated_by: UserId) -> None:
        """Record who evaluated; the first evaluation time is kept."""
        self.evaluated_by = evaluated_by
        if self.evaluated_at is None:
            self.evaluated_at = datetime.now(timezone.utc)
        self._touch()

    def complete(self) -> None:
        """Mark the evaluation completed.

        Raises:
            AuditValidationError: If no maturity level has been assigned.
        """
        if self.maturity_level_id is None:
            raise AuditValidationError(
                f"Evaluation {self.evaluation_id} cannot be completed without "
                f"a maturity level"
            )
        self.is_completed = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def is_major_non_conformity(self) -> bool:
        return self.compliance_status == ComplianceStatus.MAJOR_NON_CONFORMITY
