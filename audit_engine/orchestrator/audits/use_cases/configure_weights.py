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


"""ConfigureWeights use case implementation."""

import logging
from dataclasses import replace
from typing import List

from audit_engine.core.audits.entities import StandardWeight
from audit_engine.core.audits.exceptions import (
    AuditValidationError,
    StandardNotFoundError,
)
from audit_engine.core.audits.repositories import IdGenerator, UnitOfWork
from audit_engine.core.audits.services import WeightNormalizer
from audit_engine.core.audits.value_objects import StandardWeightId, round_weight

from ..commands import ConfigureWeightsCommand
from ..dtos import StandardWeightResponse
from .base import load_audit

logger = logging.getLogger(__name__)


class ConfigureWeightsUseCase:
    """Use case for replacing the standard weight set of an audit.

    Weights may only change while the audit is DRAFT or PLANNED. Every
    evaluated standard must receive a weight, and the whole previous set is
    replaced in the same transaction.
    """

    def __init__(self, uow: UnitOfWork, id_generator: IdGenerator) -> None:
        self._uow = uow
        self._id_generator = id_generator

    def execute(self, command: ConfigureWeightsCommand) -> List[StandardWeightResponse]:
        """Execute weight configuration.

        Args:
            command: ConfigureWeights command with one entry per standard.

        Returns:
            The stored weights ordered by display order.

        Raises:
            AuditNotFoundError: If the audit does not exist.
            ForbiddenActionError: If caller is not the lead auditor.
            InvalidStateTransitionError: If the audit is past PLANNED.
            StandardNotFoundError: If a referenced standard does not exist.
            AuditValidationError: On an invalid weight set.
        """
        with self._uow as uow:
            audit = load_audit(uow, command.audit_id, for_update=True)
            audit.assert_lead_auditor(command.configured_by, "configure weights of")
            audit.assert_weights_configurable()

            if any(entry.weight < 0 for entry in command.weights):
                raise AuditValidationError("Weights cannot be negative")

            evaluations = uow.evaluations.find_active_by_audit(audit.audit_id)
            if not evaluations:
                raise AuditValidationError(
                    "The audit has no evaluations; plan the audit before configuring weights"
                )

            configured = {entry.standard_id for entry in command.weights}
            missing = {e.standard_id for e in evaluations} - configured
            if missing:
                raise AuditValidationError(
                    "Weights must be configured for every evaluated standard; missing: "
                    + ", ".join(sorted(str(standard_id) for standard_id in missing))
                )

            records = {
                record.standard_id: record
                for record in uow.standards.find_by_ids(configured)
            }
            unknown = configured - set(records)
            if unknown:
                raise StandardNotFoundError(str(standard_id) for standard_id in unknown)
            foreign = [
                standard_id for standard_id, record in records.items()
                if record.template_id != audit.template_id
            ]
            if foreign:
                raise AuditValidationError(
                    "Standards do not belong to the audit template: "
                    + ", ".join(sorted(str(standard_id) for standard_id in foreign))
                )
            not_auditable = [
                standard_id for standard_id, record in records.items()
                if not record.is_auditable
            ]
            if not_auditable:
                raise AuditValidationError(
                    "Standards are not auditable: "
                    + ", ".join(sorted(str(standard_id) for standard_id in not_auditable))
                )

            entries = [
                replace(entry, weight=round_weight(entry.weight)) for entry in command.weights
            ]
            prepared = WeightNormalizer.prepare(entries, command.normalization_mode)
            weights = [
                StandardWeight(
                    weight_id=StandardWeightId(str(self._id_generator.generate())),
                    audit_id=audit.audit_id,
                    standard_id=entry.standard_id,
                    weight=entry.weight,
                    configured_by=command.configured_by,
                    justification=entry.justification,
                    category=entry.category,
                    display_order=entry.display_order,
                )
                for entry in prepared
            ]
            uow.weights.replace_for_audit(audit.audit_id, weights)
            uow.commit()

        logger.info(
            "Configured %d weights for audit %s (%s)",
            len(weights),
            audit.audit_id,
            command.normalization_mode.value,
        )
        ordered = sorted(weights, key=lambda weight: weight.display_order)
        return [StandardWeightResponse.from_entity(weight) for weight in ordered]
