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


"""Standard weight response DTO."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StandardWeightResponse:
    """Response DTO for one configured standard weight."""

    weight_id: str
    audit_id: str
    standard_id: str
    weight: str
    justification: Optional[str]
    category: Optional[str]
    display_order: int
    configured_by: str

    @staticmethod
    def from_entity(weight) -> "StandardWeightResponse":
        return StandardWeightResponse(
            weight_id=str(weight.weight_id),
            audit_id=str(weight.audit_id),
            standard_id=str(weight.standard_id),
            weight=str(weight.weight),
            justification=weight.justification,
            category=weight.category,
            display_order=weight.display_order,
            configured_by=str(weight.configured_by),
        )
