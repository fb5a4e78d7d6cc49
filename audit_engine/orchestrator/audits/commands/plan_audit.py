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


"""PlanAudit command DTO."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from audit_engine.core.audits.value_objects import AuditId, OrganizationId, UserId


@dataclass(frozen=True)
class PlanAuditCommand:
    """Command to plan a draft audit (DRAFT -> PLANNED).

    Attributes:
        audit_id: Audit to plan.
        planned_by: Acting user; must be the designated lead auditor.
        lead_auditor_id: Designated lead auditor.
        auditor_ids: Additional team members (at least one).
        scheduled_start_date: Planned start.
        scheduled_end_date: Planned end, after the start.
        scope: Non-blank audit scope.
        organization_id: Optional organization reassignment.
    """

    audit_id: AuditId
    planned_by: UserId
    lead_auditor_id: UserId
    scheduled_start_date: date
    scheduled_end_date: date
    scope: str
    auditor_ids: Tuple[UserId, ...] = field(default_factory=tuple)
    organization_id: Optional[OrganizationId] = None
