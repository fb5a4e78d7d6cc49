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


"""StartAudit command DTO."""

from dataclasses import dataclass

from audit_engine.core.audits.value_objects import AuditId, UserId


@dataclass(frozen=True)
class StartAuditCommand:
    """Command to start a planned audit (PLANNED -> IN_PROGRESS)."""

    audit_id: AuditId
    started_by: UserId
