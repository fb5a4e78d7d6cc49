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


"""RequestClosure command DTO."""

from dataclasses import dataclass
from typing import Optional

from audit_engine.core.audits.value_objects import AuditId, UserId


@dataclass(frozen=True)
class RequestClosureCommand:
    """Command to request closure (IN_PROGRESS -> PENDING_CLOSURE).

    Attributes:
        audit_id: Audit to close.
        requested_by: Acting user; must be the lead auditor.
        report_url: Optional reference to a generated report.
    """

    audit_id: AuditId
    requested_by: UserId
    report_url: Optional[str] = None
