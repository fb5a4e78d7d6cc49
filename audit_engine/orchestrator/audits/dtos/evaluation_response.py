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


"""Evaluation response DTO."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EvaluationResponse:
    """Response DTO for evaluation operations."""

    evaluation_id: str
    audit_id: str
    standard_id: str
    maturity_level_id: Optional[str]
    compliance_status: Optional[str]
    score: str
    is_completed: bool
    previous_evaluation_id: Optional[str]
    observations: Optional[str]
    recommendations: Optional[str]
    evaluated_by: Optional[str]

    @staticmethod
    def from_entity(evaluation) -> "EvaluationResponse":
        return EvaluationResponse(
            evaluation_id=str(evaluation.evaluation_id),
            audit_id=str(evaluation.audit_id),
            standard_id=str(evaluation.standard_id),
            maturity_level_id=(
                str(evaluation.maturity_level_id) if evaluation.maturity_level_id else None
            ),
            compliance_status=(
                evaluation.compliance_status.value if evaluation.compliance_status else None
            ),
            score=str(evaluation.score),
            is_completed=evaluation.is_completed,
            previous_evaluation_id=(
                str(evaluation.previous_evaluation_id)
                if evaluation.previous_evaluation_id else None
            ),
            observations=evaluation.observations,
            recommendations=evaluation.recommendations,
            evaluated_by=str(evaluation.evaluated_by) if evaluation.evaluated_by else None,
        )
