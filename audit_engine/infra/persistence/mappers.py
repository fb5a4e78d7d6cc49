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


"""Row <-> domain entity conversion."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from audit_engine.core.audits.entities import (
    ActionPlan,
    Audit,
    CancellationMetadata,
    ClosureMetadata,
    Evaluation,
    MaturityLevel,
    StandardRecord,
    StandardWeight,
)
from audit_engine.core.audits.value_objects import (
    ActionPlanId,
    AuditId,
    EvaluationId,
    FrameworkId,
    MaturityLevelId,
    OrganizationId,
    StandardId,
    StandardWeightId,
    TemplateId,
    UserId,
)

from .models import (
    ActionPlanRow,
    AuditRow,
    EvaluationRow,
    MaturityLevelRow,
    StandardRow,
    StandardWeightRow,
)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; stored values are always UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _str(value) -> Optional[str]:
    return str(value) if value is not None else None


def _opt(cls, value):
    return cls(value) if value is not None else None


def audit_values(audit: Audit) -> Dict[str, Any]:
    """Column values of an audit, excluding the primary key."""
    return {
        "name": audit.name,
        "template_id": str(audit.template_id),
        "framework_id": str(audit.framework_id),
        "organization_id": str(audit.organization_id),
        "lead_auditor_id": str(audit.lead_auditor_id),
        "audit_type": audit.audit_type,
        "status": audit.status,
        "scope": audit.scope,
        "description": audit.description,
        "start_date": audit.start_date,
        "end_date": audit.end_date,
        "parent_audit_id": _str(audit.parent_audit_id),
        "total_score": audit.total_score,
        "progress": audit.progress,
        "closure_metadata": (
            audit.closure_metadata.to_dict() if audit.closure_metadata else None
        ),
        "closure_approved_at": audit.closure_approved_at,
        "closure_approved_by": _str(audit.closure_approved_by),
        "cancellation_metadata": (
            audit.cancellation_metadata.to_dict() if audit.cancellation_metadata else None
        ),
        "is_active": audit.is_active,
        "created_at": audit.created_at,
        "updated_at": audit.updated_at,
        "version": audit.version,
    }


def audit_to_row(audit: Audit) -> AuditRow:
    return AuditRow(id=str(audit.audit_id), **audit_values(audit))


def audit_from_row(row: AuditRow, team_ids: Sequence[str]) -> Audit:
    return Audit(
        audit_id=AuditId(row.id),
        name=row.name,
        template_id=TemplateId(row.template_id),
        framework_id=FrameworkId(row.framework_id),
        organization_id=OrganizationId(row.organization_id),
        lead_auditor_id=UserId(row.lead_auditor_id),
        start_date=row.start_date,
        audit_type=row.audit_type,
        status=row.status,
        audit_team_ids=[UserId(user_id) for user_id in team_ids],
        scope=row.scope,
        description=row.description,
        end_date=row.end_date,
        parent_audit_id=_opt(AuditId, row.parent_audit_id),
        total_score=row.total_score,
        progress=row.progress,
        closure_metadata=(
            ClosureMetadata.from_dict(row.closure_metadata) if row.closure_metadata else None
        ),
        closure_approved_at=_aware(row.closure_approved_at),
        closure_approved_by=_opt(UserId, row.closure_approved_by),
        cancellation_metadata=(
            CancellationMetadata.from_dict(row.cancellation_metadata)
            if row.cancellation_metadata else None
        ),
        is_active=row.is_active,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
        version=row.version,
    )


def evaluation_to_row(evaluation: Evaluation) -> EvaluationRow:
    return EvaluationRow(
        id=str(evaluation.evaluation_id),
        audit_id=str(evaluation.audit_id),
        standard_id=str(evaluation.standard_id),
        maturity_level_id=_str(evaluation.maturity_level_id),
        compliance_status=evaluation.compliance_status,
        score=evaluation.score,
        is_completed=evaluation.is_completed,
        previous_evaluation_id=_str(evaluation.previous_evaluation_id),
        observations=evaluation.observations,
        recommendations=evaluation.recommendations,
        findings=evaluation.findings,
        comments=evaluation.comments,
        evaluated_by=_str(evaluation.evaluated_by),
        evaluated_at=evaluation.evaluated_at,
        is_active=evaluation.is_active,
        created_at=evaluation.created_at,
        updated_at=evaluation.updated_at,
    )


def evaluation_from_row(row: EvaluationRow) -> Evaluation:
    return Evaluation(
        evaluation_id=EvaluationId(row.id),
        audit_id=AuditId(row.audit_id),
        standard_id=StandardId(row.standard_id),
        maturity_level_id=_opt(MaturityLevelId, row.maturity_level_id),
        compliance_status=row.compliance_status,
        score=row.score,
        is_completed=row.is_completed,
        previous_evaluation_id=_opt(EvaluationId, row.previous_evaluation_id),
        observations=row.observations,
        recommendations=row.recommendations,
        findings=row.findings,
        comments=row.comments,
        evaluated_by=_opt(UserId, row.evaluated_by),
        evaluated_at=_aware(row.evaluated_at),
        is_active=row.is_active,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


def action_plan_to_row(plan: ActionPlan) -> ActionPlanRow:
    return ActionPlanRow(
        id=str(plan.action_plan_id),
        evaluation_id=str(plan.evaluation_id),
        description=plan.description,
        responsible_id=_str(plan.responsible_id),
        due_date=plan.due_date,
        status=plan.status,
        approved_by=_str(plan.approved_by),
        approved_at=plan.approved_at,
        rejection_reason=plan.rejection_reason,
        completed_at=plan.completed_at,
        verified_by=_str(plan.verified_by),
        verified_at=plan.verified_at,
        is_active=plan.is_active,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
        version=plan.version,
    )


def action_plan_from_row(row: ActionPlanRow) -> ActionPlan:
    return ActionPlan(
        action_plan_id=ActionPlanId(row.id),
        evaluation_id=EvaluationId(row.evaluation_id),
        description=row.description,
        responsible_id=_opt(UserId, row.responsible_id),
        due_date=row.due_date,
        status=row.status,
        approved_by=_opt(UserId, row.approved_by),
        approved_at=_aware(row.approved_at),
        rejection_reason=row.rejection_reason,
        completed_at=_aware(row.completed_at),
        verified_by=_opt(UserId, row.verified_by),
        verified_at=_aware(row.verified_at),
        is_active=row.is_active,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
        version=row.version,
    )


def weight_to_row(weight: StandardWeight) -> StandardWeightRow:
    return StandardWeightRow(
        id=str(weight.weight_id),
        audit_id=str(weight.audit_id),
        standard_id=str(weight.standard_id),
        weight=weight.weight,
        justification=weight.justification,
        category=weight.category,
        display_order=weight.display_order,
        configured_by=str(weight.configured_by),
        created_at=weight.created_at or datetime.now(timezone.utc),
    )


def weight_from_row(row: StandardWeightRow) -> StandardWeight:
    return StandardWeight(
        weight_id=StandardWeightId(row.id),
        audit_id=AuditId(row.audit_id),
        standard_id=StandardId(row.standard_id),
        weight=row.weight,
        configured_by=UserId(row.configured_by),
        justification=row.justification,
        category=row.category,
        display_order=row.display_order,
        created_at=_aware(row.created_at),
    )


def standard_from_row(row: StandardRow) -> StandardRecord:
    return StandardRecord(
        standard_id=StandardId(row.id),
        template_id=TemplateId(row.template_id),
        is_auditable=row.is_auditable,
    )


def maturity_level_from_row(row: MaturityLevelRow) -> MaturityLevel:
    return MaturityLevel(
        level_id=MaturityLevelId(row.id),
        framework_id=FrameworkId(row.framework_id),
        score=row.score,
        observations=row.observations,
        recommendations=row.recommendations,
    )
