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


"""Request models for audit endpoints."""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from audit_engine.core.audits.value_objects import (
    AuditType,
    ComplianceStatus,
    NormalizationMode,
    WeightSource,
)


class CreateAuditRequest(BaseModel):
    """Body of POST /audits."""

    name: str = Field(..., min_length=1, max_length=255)
    template_id: UUID
    framework_id: UUID
    organization_id: UUID
    lead_auditor_id: UUID
    start_date: date
    audit_type: AuditType = AuditType.INITIAL
    parent_audit_id: Optional[UUID] = None
    description: Optional[str] = None


class PlanAuditRequest(BaseModel):
    """Body of POST /audits/{audit_id}/plan."""

    lead_auditor_id: UUID
    auditor_ids: List[UUID] = Field(default_factory=list)
    scheduled_start_date: date
    scheduled_end_date: date
    scope: str
    organization_id: Optional[UUID] = None


class ClosureRequest(BaseModel):
    """Body of request-closure and close; both fields are optional."""

    report_url: Optional[str] = Field(default=None, max_length=500)


class CancelAuditRequest(BaseModel):
    cancellation_reason: str


class WeightItem(BaseModel):
    standard_id: UUID
    weight: Decimal
    justification: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)
    display_order: int = 0


class ConfigureWeightsRequest(BaseModel):
    """Body of POST /audits/{audit_id}/weights."""

    weights: List[WeightItem]
    normalization_mode: NormalizationMode = NormalizationMode.AUTO


class CopyWeightsRequest(BaseModel):
    """Body of POST /audits/{audit_id}/weights/copy."""

    source: WeightSource
    source_audit_id: Optional[UUID] = None
    adjustment_factor: Decimal = Decimal("1.0")
    normalization_mode: NormalizationMode = NormalizationMode.AUTO


class UpdateEvaluationRequest(BaseModel):
    """Body of PATCH /evaluations/{evaluation_id}; omitted fields are kept."""

    maturity_level_id: Optional[UUID] = None
    compliance_status: Optional[ComplianceStatus] = None
    observations: Optional[str] = None
    recommendations: Optional[str] = None
    findings: Optional[str] = None
    comments: Optional[str] = None
