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


"""CopyWeights command DTO."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from audit_engine.core.audits.value_objects import (
    AuditId,
    NormalizationMode,
    UserId,
    WeightSource,
)


@dataclass(frozen=True)
class CopyWeightsCommand:
    """Command to derive an audit's weights from an existing weight set.

    Attributes:
        audit_id: Destination audit.
        source: TEMPLATE or PREVIOUS_AUDIT.
        copied_by: Acting user; must be the lead auditor.
        source_audit_id: Required when source is PREVIOUS_AUDIT.
        adjustment_factor: Multiplier applied to every copied weight.
        normalization_mode: Passed through to the configuration step.
    """

    audit_id: AuditId
    source: WeightSource
    copied_by: UserId
    source_audit_id: Optional[AuditId] = None
    adjustment_factor: Decimal = Decimal("1.0")
    normalization_mode: NormalizationMode = NormalizationMode.AUTO
