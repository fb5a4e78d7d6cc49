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


"""CancelAudit command DTO."""

from dataclasses import dataclass

from audit_engine.core.audits.value_objects import AuditId, UserId


@dataclass(frozen=True)
class CancelAuditCommand:
    """Command to cancel an audit from any non-terminal state.

    Attributes:
        audit_id: Audit to cancel.
        cancelled_by: Acting user.
        cancellation_reason: Mandatory, non-blank reason.
        elevated: Set by the HTTP boundary when the caller holds a role that
            may cancel audits it does not lead.
    """

    audit_id: AuditId
    cancelled_by: UserId
    cancellation_reason: str
    elevated: bool = False
