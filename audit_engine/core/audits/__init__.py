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


"""Audit domain module for Audit Engine."""

from .entities import (
    ActionPlan,
    Audit,
    CancellationMetadata,
    ClosureMetadata,
    ClosureStatistics,
    Evaluation,
    MaturityLevel,
    NonConformitiesCount,
    StandardRecord,
    StandardWeight,
)
from .exceptions import (
    AuditCannotBeClosedError,
    AuditDomainError,
    AuditNotFoundError,
    AuditValidationError,
    EvaluationNotFoundError,
    ForbiddenActionError,
    InvalidStateTransitionError,
    MaturityLevelNotFoundError,
    OptimisticLockError,
    ResourceNotFoundError,
    StandardNotFoundError,
    UserNotFoundError,
)
from .repositories import (
    ActionPlanRepository,
    AuditRepository,
    EvaluationRepository,
    IdGenerator,
    MaturityLevelDirectory,
    StandardDirectory,
    StandardWeightRepository,
    UnitOfWork,
    UserDirectory,
)
from .services import (
    ClosureValidator,
    WeightEntry,
    WeightNormalizer,
    compute_closure_statistics,
    compute_progress,
)
from .value_objects import (
    ActionPlanId,
    ActionPlanStatus,
    AuditCommand,
    AuditId,
    AuditStatus,
    AuditType,
    ComplianceStatus,
    EvaluationId,
    FrameworkId,
    MaturityLevelId,
    NormalizationMode,
    OrganizationId,
    StandardId,
    StandardWeightId,
    TemplateId,
    UserId,
    WeightSource,
)

__all__ = [
    "ActionPlan",
    "Audit",
    "CancellationMetadata",
    "ClosureMetadata",
    "ClosureStatistics",
    "Evaluation",
    "MaturityLevel",
    "NonConformitiesCount",
    "StandardRecord",
    "StandardWeight",
    "AuditCannotBeClosedError",
    "AuditDomainError",
    "AuditNotFoundError",
    "AuditValidationError",
    "EvaluationNotFoundError",
    "ForbiddenActionError",
    "InvalidStateTransitionError",
    "MaturityLevelNotFoundError",
    "OptimisticLockError",
    "ResourceNotFoundError",
    "StandardNotFoundError",
    "UserNotFoundError",
    "ActionPlanRepository",
    "AuditRepository",
    "EvaluationRepository",
    "IdGenerator",
    "MaturityLevelDirectory",
    "StandardDirectory",
    "StandardWeightRepository",
    "UnitOfWork",
    "UserDirectory",
    "ClosureValidator",
    "WeightEntry",
    "WeightNormalizer",
    "compute_closure_statistics",
    "compute_progress",
    "ActionPlanId",
    "ActionPlanStatus",
    "AuditCommand",
    "AuditId",
    "AuditStatus",
    "AuditType",
    "ComplianceStatus",
    "EvaluationId",
    "FrameworkId",
    "MaturityLevelId",
    "NormalizationMode",
    "OrganizationId",
    "StandardId",
    "StandardWeightId",
    "TemplateId",
    "UserId",
    "WeightSource",
]
