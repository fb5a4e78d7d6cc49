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


"""CreateAudit command DTO."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from audit_engine.core.audits.value_objects import (
    AuditId,
    AuditType,
    FrameworkId,
    OrganizationId,
    TemplateId,
    UserId,
)


@dataclass(frozen=True)
class CreateAuditCommand:
    """Command to create a draft audit and generate its evaluations.

    Attributes:
        name: Display name.
        template_id: Template whose standards are evaluated.
        framework_id: Scoring framework.
        organization_id: Audited organization.
        lead_auditor_id: Initial lead auditor.
        start_date: Tentative start date.
        created_by: Acting user.
        audit_type: Initial, follow-up or recertification.
        parent_audit_id: Closed audit a follow-up derives from.
    """

    name: str
    template_id: TemplateId
    framework_id: FrameworkId
    organization_id: OrganizationId
    lead_auditor_id: UserId
    start_date: date
    created_by: UserId
    audit_type: AuditType = AuditType.INITIAL
    parent_audit_id: Optional[AuditId] = None
    description: Optional[str] = None
