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


"""Standard weight entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..value_objects import AuditId, StandardId, StandardWeightId, UserId


@dataclass(frozen=True)
class StandardWeight:
    """Per-audit, per-standard scoring multiplier.

    Unique per (audit_id, standard_id). The full set for an audit is replaced
    atomically on every configuration.

    Attributes:
        weight_id: Unique record identifier.
        audit_id: Owning audit.
        standard_id: Weighted standard.
        weight: Relative multiplier (>= 0).
        configured_by: User who configured the set.
        justification: Optional rationale.
        category: Optional grouping for reports.
        display_order: Report ordering.
        created_at: Record creation timestamp.
    """

    weight_id: StandardWeightId
    audit_id: AuditId
    standard_id: StandardId
    weight: Decimal
    configured_by: UserId
    justification: Optional[str] = None
    category: Optional[str] = None
    display_order: int = 0
    created_at: Optional[datetime] = None
