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


"""UpdateEvaluation and CompleteEvaluation command DTOs."""

from dataclasses import dataclass
from typing import Optional

from audit_engine.core.audits.value_objects import (
    ComplianceStatus,
    EvaluationId,
    MaturityLevelId,
    UserId,
)


@dataclass(frozen=True)
class UpdateEvaluationCommand:
    """Command to record an evaluator's assessment.

    Unset fields are left untouched.

    Attributes:
        evaluation_id: Evaluation to update.
        updated_by: Acting user, recorded as evaluator.
        maturity_level_id: Level whose score/texts are copied.
        compliance_status: Outcome classification.
    """

    evaluation_id: EvaluationId
    updated_by: UserId
    maturity_level_id: Optional[MaturityLevelId] = None
    compliance_status: Optional[ComplianceStatus] = None
    observations: Optional[str] = None
    recommendations: Optional[str] = None
    findings: Optional[str] = None
    comments: Optional[str] = None


@dataclass(frozen=True)
class CompleteEvaluationCommand:
    """Command to mark an evaluation completed."""

    evaluation_id: EvaluationId
    completed_by: UserId
