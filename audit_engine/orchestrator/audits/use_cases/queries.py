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


"""Read-only audit queries."""

from typing import List

from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.value_objects import AuditId

from ..dtos import AuditResponse, StandardWeightResponse
from .base import load_audit


class GetAuditUseCase:
    """Fetch a single active audit."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, audit_id: AuditId) -> AuditResponse:
        with self._uow as uow:
            audit = load_audit(uow, audit_id)
        return AuditResponse.from_entity(audit)


class ListWeightsUseCase:
    """List the configured weights of an audit by display order."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def execute(self, audit_id: AuditId) -> List[StandardWeightResponse]:
        with self._uow as uow:
            load_audit(uow, audit_id)
            weights = uow.weights.find_by_audit(audit_id)
        return [StandardWeightResponse.from_entity(weight) for weight in weights]
