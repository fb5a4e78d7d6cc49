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


"""CloseAudit command DTO."""

from dataclasses import dataclass
from typing import Optional

from audit_engine.core.audits.value_objects import AuditId, UserId


@dataclass(frozen=True)
class CloseAuditCommand:
    """Command to close an approved audit (PENDING_CLOSURE -> CLOSED).

    Attributes:
        audit_id: Audit to close.
        closed_by: Acting user; must be the lead auditor.
        report_url: Optional report reference; the provisional one is kept
            when omitted.
    """

    audit_id: AuditId
    closed_by: UserId
    report_url: Optional[str] = None
