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


"""Read-only records resolved from collaborating directories."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..value_objects import FrameworkId, MaturityLevelId, StandardId, TemplateId


@dataclass(frozen=True)
class StandardRecord:
    """Standard as seen by the audit core.

    Attributes:
        standard_id: Standard identifier.
        template_id: Template the standard belongs to.
        is_auditable: False for grouping/heading standards.
    """

    standard_id: StandardId
    template_id: TemplateId
    is_auditable: bool = True


@dataclass(frozen=True)
class MaturityLevel:
    """Predefined score/text bundle selectable for an evaluation."""

    level_id: MaturityLevelId
    framework_id: FrameworkId
    score: Decimal
    observations: Optional[str] = None
    recommendations: Optional[str] = None
