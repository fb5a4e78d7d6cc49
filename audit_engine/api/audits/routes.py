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


"""Audit lifecycle, weight and evaluation endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from audit_engine.core.audits.repositories import IdGenerator, UnitOfWork
from audit_engine.core.audits.services import WeightEntry
from audit_engine.core.audits.value_objects import (
    AuditId,
    EvaluationId,
    FrameworkId,
    MaturityLevelId,
    OrganizationId,
    StandardId,
    TemplateId,
    UserId,
)
from audit_engine.orchestrator.audits.commands import (
    ApproveClosureCommand,
    CancelAuditCommand,
    CloseAuditCommand,
    CompleteEvaluationCommand,
    ConfigureWeightsCommand,
    CopyWeightsCommand,
    CreateAuditCommand,
    PlanAuditCommand,
    RequestClosureCommand,
    StartAuditCommand,
    UpdateEvaluationCommand,
    UpdateProgressCommand,
)
from audit_engine.orchestrator.audits.dtos import (
    AuditResponse,
    EvaluationResponse,
    StandardWeightResponse,
)
from audit_engine.orchestrator.audits.use_cases import (
    ApproveClosureUseCase,
    CancelAuditUseCase,
    CloseAuditUseCase,
    CompleteEvaluationUseCase,
    ConfigureWeightsUseCase,
    CopyWeightsUseCase,
    CreateAuditUseCase,
    GetAuditUseCase,
    ListWeightsUseCase,
    PlanAuditUseCase,
    RequestClosureUseCase,
    StartAuditUseCase,
    UpdateEvaluationUseCase,
    UpdateProgressUseCase,
)

from .dependencies import get_acting_user, get_id_generator, get_unit_of_work, is_elevated
from .schemas import (
    CancelAuditRequest,
    ClosureRequest,
    ConfigureWeightsRequest,
    CopyWeightsRequest,
    CreateAuditRequest,
    PlanAuditRequest,
    UpdateEvaluationRequest,
)

audits_router = APIRouter(prefix="/audits", tags=["audits"])
evaluations_router = APIRouter(prefix="/evaluations", tags=["evaluations"])


def _opt(cls, value: Optional[UUID]):
    return cls(str(value)) if value is not None else None


# === AUDIT LIFECYCLE ===

@audits_router.post("", status_code=status.HTTP_201_CREATED, response_model=AuditResponse)
def create_audit(
    body: CreateAuditRequest,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    id_generator: IdGenerator = Depends(get_id_generator),
):
    command = CreateAuditCommand(
        name=body.name,
        template_id=TemplateId(str(body.template_id)),
        framework_id=FrameworkId(str(body.framework_id)),
        organization_id=OrganizationId(str(body.organization_id)),
        lead_auditor_id=UserId(str(body.lead_auditor_id)),
        start_date=body.start_date,
        created_by=user_id,
        audit_type=body.audit_type,
        parent_audit_id=_opt(AuditId, body.parent_audit_id),
        description=body.description,
    )
    return CreateAuditUseCase(uow, id_generator).execute(command)


@audits_router.get("/{audit_id}", response_model=AuditResponse)
def get_audit(
    audit_id: UUID,
    _user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return GetAuditUseCase(uow).execute(AuditId(str(audit_id)))


@audits_router.post("/{audit_id}/plan", response_model=AuditResponse)
def plan_audit(
    audit_id: UUID,
    body: PlanAuditRequest,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = PlanAuditCommand(
        audit_id=AuditId(str(audit_id)),
        planned_by=user_id,
        lead_auditor_id=UserId(str(body.lead_auditor_id)),
        scheduled_start_date=body.scheduled_start_date,
        scheduled_end_date=body.scheduled_end_date,
        scope=body.scope,
        auditor_ids=tuple(UserId(str(member)) for member in body.auditor_ids),
        organization_id=_opt(OrganizationId, body.organization_id),
    )
    return PlanAuditUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/start", response_model=AuditResponse)
def start_audit(
    audit_id: UUID,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = StartAuditCommand(audit_id=AuditId(str(audit_id)), started_by=user_id)
    return StartAuditUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/request-closure", response_model=AuditResponse)
def request_closure(
    audit_id: UUID,
    body: Optional[ClosureRequest] = None,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = RequestClosureCommand(
        audit_id=AuditId(str(audit_id)),
        requested_by=user_id,
        report_url=body.report_url if body else None,
    )
    return RequestClosureUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/approve-closure", response_model=AuditResponse)
def approve_closure(
    audit_id: UUID,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = ApproveClosureCommand(audit_id=AuditId(str(audit_id)), approved_by=user_id)
    return ApproveClosureUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/close", response_model=AuditResponse)
def close_audit(
    audit_id: UUID,
    body: Optional[ClosureRequest] = None,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CloseAuditCommand(
        audit_id=AuditId(str(audit_id)),
        closed_by=user_id,
        report_url=body.report_url if body else None,
    )
    return CloseAuditUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/cancel", response_model=AuditResponse)
def cancel_audit(
    audit_id: UUID,
    body: CancelAuditRequest,
    user_id: UserId = Depends(get_acting_user),
    elevated: bool = Depends(is_elevated),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CancelAuditCommand(
        audit_id=AuditId(str(audit_id)),
        cancelled_by=user_id,
        cancellation_reason=body.cancellation_reason,
        elevated=elevated,
    )
    return CancelAuditUseCase(uow).execute(command)


@audits_router.post("/{audit_id}/progress", response_model=AuditResponse)
def update_progress(
    audit_id: UUID,
    _user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return UpdateProgressUseCase(uow).execute(
        UpdateProgressCommand(audit_id=AuditId(str(audit_id)))
    )


# === WEIGHTS ===

@audits_router.get("/{audit_id}/weights", response_model=List[StandardWeightResponse])
def list_weights(
    audit_id: UUID,
    _user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return ListWeightsUseCase(uow).execute(AuditId(str(audit_id)))


@audits_router.post("/{audit_id}/weights", response_model=List[StandardWeightResponse])
def configure_weights(
    audit_id: UUID,
    body: ConfigureWeightsRequest,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    id_generator: IdGenerator = Depends(get_id_generator),
):
    command = ConfigureWeightsCommand(
        audit_id=AuditId(str(audit_id)),
        configured_by=user_id,
        weights=tuple(
            WeightEntry(
                standard_id=StandardId(str(item.standard_id)),
                weight=item.weight,
                justification=item.justification,
                category=item.category,
                display_order=item.display_order,
            )
            for item in body.weights
        ),
        normalization_mode=body.normalization_mode,
    )
    return ConfigureWeightsUseCase(uow, id_generator).execute(command)


@audits_router.post("/{audit_id}/weights/copy", response_model=List[StandardWeightResponse])
def copy_weights(
    audit_id: UUID,
    body: CopyWeightsRequest,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    id_generator: IdGenerator = Depends(get_id_generator),
):
    command = CopyWeightsCommand(
        audit_id=AuditId(str(audit_id)),
        source=body.source,
        copied_by=user_id,
        source_audit_id=_opt(AuditId, body.source_audit_id),
        adjustment_factor=body.adjustment_factor,
        normalization_mode=body.normalization_mode,
    )
    configure = ConfigureWeightsUseCase(uow, id_generator)
    return CopyWeightsUseCase(uow, configure).execute(command)


# === EVALUATIONS ===

@evaluations_router.patch("/{evaluation_id}", response_model=EvaluationResponse)
def update_evaluation(
    evaluation_id: UUID,
    body: UpdateEvaluationRequest,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateEvaluationCommand(
        evaluation_id=EvaluationId(str(evaluation_id)),
        updated_by=user_id,
        maturity_level_id=_opt(MaturityLevelId, body.maturity_level_id),
        compliance_status=body.compliance_status,
        observations=body.observations,
        recommendations=body.recommendations,
        findings=body.findings,
        comments=body.comments,
    )
    return UpdateEvaluationUseCase(uow).execute(command)


@evaluations_router.post("/{evaluation_id}/complete", response_model=EvaluationResponse)
def complete_evaluation(
    evaluation_id: UUID,
    user_id: UserId = Depends(get_acting_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CompleteEvaluationCommand(
        evaluation_id=EvaluationId(str(evaluation_id)),
        completed_by=user_id,
    )
    return CompleteEvaluationUseCase(uow).execute(command)
