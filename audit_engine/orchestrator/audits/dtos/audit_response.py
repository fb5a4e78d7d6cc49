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


"""Audit response DTO."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class AuditResponse:
    """Response DTO for audit operations.

    Immutable data transfer object for returning audit information to the
    API layer. Timestamps and dates are ISO 8601 strings; decimals are
    strings to keep their exact scale.
    """

    audit_id: str
    name: str
    status: str
    audit_type: str
    template_id: str
    framework_id: str
    organization_id: str
    lead_auditor_id: str
    audit_team_ids: List[str]
    scope: Optional[str]
    start_date: Optional[str]
    end_date: Optional[str]
    parent_audit_id: Optional[str]
    total_score: str
    progress: str
    closure_metadata: Optional[Dict[str, Any]]
    closure_approved_at: Optional[str]
    closure_approved_by: Optional[str]
    cancellation_metadata: Optional[Dict[str, Any]]
    created_at: str
    updated_at: str
    version: int

    @staticmethod
    def from_entity(audit) -> "AuditResponse":
        """Create response DTO from Audit entity."""
        return AuditResponse(
            audit_id=str(audit.audit_id),
            name=audit.name,
            status=audit.status.value,
            audit_type=audit.audit_type.value,
            template_id=str(audit.template_id),
            framework_id=str(audit.framework_id),
            organization_id=str(audit.organization_id),
            lead_auditor_id=str(audit.lead_auditor_id),
            audit_team_ids=[str(member) for member in audit.audit_team_ids],
            scope=audit.scope,
            start_date=_iso(audit.start_date),
            end_date=_iso(audit.end_date),
            parent_audit_id=str(audit.parent_audit_id) if audit.parent_audit_id else None,
            total_score=str(audit.total_score),
            progress=str(audit.progress),
            closure_metadata=(
                audit.closure_metadata.to_dict() if audit.closure_metadata else None
            ),
            closure_approved_at=_iso(audit.closure_approved_at),
            closure_approved_by=(
                str(audit.closure_approved_by) if audit.closure_approved_by else None
            ),
            cancellation_metadata=(
                audit.cancellation_metadata.to_dict()
                if audit.cancellation_metadata else None
            ),
            created_at=audit.created_at.isoformat(),
            updated_at=audit.updated_at.isoformat(),
            version=audit.version,
        )
