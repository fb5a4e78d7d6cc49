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


"""ConfigureWeights command DTO."""

from dataclasses import dataclass, field
from typing import Tuple

from audit_engine.core.audits.services import WeightEntry
from audit_engine.core.audits.value_objects import AuditId, NormalizationMode, UserId


@dataclass(frozen=True)
class ConfigureWeightsCommand:
    """Command to replace the standard weight set of an audit.

    Attributes:
        audit_id: Audit whose weights are configured.
        configured_by: Acting user; must be the lead auditor.
        weights: One entry per standard.
        normalization_mode: AUTO rescales to sum = number of entries.
    """

    audit_id: AuditId
    configured_by: UserId
    weights: Tuple[WeightEntry, ...] = field(default_factory=tuple)
    normalization_mode: NormalizationMode = NormalizationMode.AUTO
