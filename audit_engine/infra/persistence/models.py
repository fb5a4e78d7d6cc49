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


"""Database models for the audit domain."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean, Date, DateTime, Enum as SQLEnum, ForeignKey, Integer, JSON, Numeric,
    String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from audit_engine.core.audits.value_objects import (
    ActionPlanStatus,
    AuditStatus,
    AuditType,
    ComplianceStatus,
)

from .database import Base

ID = String(36)


# === REFERENCE DATA ===

class UserRow(Base):
    """User directory entry; only existence matters to the audit core."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class StandardRow(Base):
    """Standard belonging to an audit template."""
    __tablename__ = "standards"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    template_id: Mapped[str] = mapped_column(ID, nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_auditable: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class MaturityLevelRow(Base):
    """Maturity level of a scoring framework."""
    __tablename__ = "maturity_levels"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    framework_id: Mapped[str] = mapped_column(ID, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    score: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    observations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    recommendations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


# === AUDIT AGGREGATE ===

class AuditRow(Base):
    """Audit aggregate root."""
    __tablename__ = "audits"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    template_id: Mapped[str] = mapped_column(ID, nullable=False, index=True)
    framework_id: Mapped[str] = mapped_column(ID, nullable=False)
    organization_id: Mapped[str] = mapped_column(ID, nullable=False)
    lead_auditor_id: Mapped[str] = mapped_column(ID, nullable=False)
    audit_type: Mapped[AuditType] = mapped_column(SQLEnum(AuditType), nullable=False)
    status: Mapped[AuditStatus] = mapped_column(SQLEnum(AuditStatus), nullable=False, index=True)
    scope: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    parent_audit_id: Mapped[Optional[str]] = mapped_column(ID, ForeignKey("audits.id"), nullable=True)
    total_score: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    progress: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=Decimal("0"), nullable=False)
    # Serialized ClosureMetadata / CancellationMetadata
    closure_metadata: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    closure_approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    closure_approved_by: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    cancellation_metadata: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)


class AuditTeamMemberRow(Base):
    """Additional auditor assigned to an audit."""
    __tablename__ = "audit_team_members"

    audit_id: Mapped[str] = mapped_column(ID, ForeignKey("audits.id"), primary_key=True)
    user_id: Mapped[str] = mapped_column(ID, primary_key=True)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class EvaluationRow(Base):
    """Evaluation of one standard within one audit."""
    __tablename__ = "evaluations"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    audit_id: Mapped[str] = mapped_column(ID, ForeignKey("audits.id"), nullable=False, index=True)
    standard_id: Mapped[str] = mapped_column(ID, nullable=False)
    maturity_level_id: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    compliance_status: Mapped[Optional[ComplianceStatus]] = mapped_column(
        SQLEnum(ComplianceStatus), nullable=True
    )
    score: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    previous_evaluation_id: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    observations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    recommendations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    findings: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    evaluated_by: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    evaluated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class ActionPlanRow(Base):
    """Remediation plan for an evaluation's finding."""
    __tablename__ = "action_plans"

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    evaluation_id: Mapped[str] = mapped_column(ID, ForeignKey("evaluations.id"), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    responsible_id: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[ActionPlanStatus] = mapped_column(SQLEnum(ActionPlanStatus), nullable=False)
    approved_by: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    verified_by: Mapped[Optional[str]] = mapped_column(ID, nullable=True)
    verified_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)


class StandardWeightRow(Base):
    """Per-audit standard weight."""
    __tablename__ = "audit_standard_weights"
    __table_args__ = (UniqueConstraint("audit_id", "standard_id", name="uq_audit_standard_weight"),)

    id: Mapped[str] = mapped_column(ID, primary_key=True)
    audit_id: Mapped[str] = mapped_column(ID, ForeignKey("audits.id"), nullable=False, index=True)
    standard_id: Mapped[str] = mapped_column(ID, nullable=False)
    weight: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    justification: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    configured_by: Mapped[str] = mapped_column(ID, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
