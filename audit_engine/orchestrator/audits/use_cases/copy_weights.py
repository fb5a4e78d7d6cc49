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


"""CopyWeights use case implementation."""

import logging
from decimal import Decimal
from typing import List

from audit_engine.core.audits.entities import Audit, StandardWeight
from audit_engine.core.audits.exceptions import AuditNotFoundError, AuditValidationError
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.services import WeightEntry, mean_weight
from audit_engine.core.audits.value_objects import WeightSource

from ..commands import ConfigureWeightsCommand, CopyWeightsCommand
from ..dtos import StandardWeightResponse
from .base import load_audit
from .configure_weights import ConfigureWeightsUseCase

logger = logging.getLogger(__name__)

MIN_ADJUSTMENT_FACTOR = Decimal("0.1")
MISSING_STANDARD_ORDER = 999


class CopyWeightsUseCase:
    """Use case for deriving an audit's weights from an existing set.

    The source set is either the most recent audit of the same template that
    has weights, or an explicitly named audit. Copied weights are scaled by
    the adjustment factor; standards the destination evaluates but the source
    lacks get the mean copied weight. The resulting set goes through
    ConfigureWeightsUseCase so the same validation applies.
    """

    def __init__(self, uow: UnitOfWork, configure_weights: ConfigureWeightsUseCase) -> None:
        self._uow = uow
        self._configure_weights = configure_weights

    def execute(self, command: CopyWeightsCommand) -> List[StandardWeightResponse]:
        """Execute weight copy.

        Raises:
            AuditNotFoundError: If the destination or source audit is missing.
            ForbiddenActionError: If caller is not the lead auditor.
            InvalidStateTransitionError: If the destination is past PLANNED.
            AuditValidationError: If no usable source weights exist.
        """
        if command.adjustment_factor < MIN_ADJUSTMENT_FACTOR:
            raise AuditValidationError(
                f"Adjustment factor must be at least {MIN_ADJUSTMENT_FACTOR}"
            )

        with self._uow as uow:
            audit = load_audit(uow, command.audit_id)
            audit.assert_lead_auditor(command.copied_by, "configure weights of")
            audit.assert_weights_configurable()

            source_weights = self._resolve_source(uow, audit, command)
            target_standards = [
                e.standard_id for e in uow.evaluations.find_active_by_audit(audit.audit_id)
            ]
            if not target_standards:
                raise AuditValidationError(
                    "The audit has no evaluations; plan the audit before configuring weights"
                )

        entries = self._map_weights(source_weights, target_standards, command)
        logger.info(
            "Copying %d weights into audit %s from %s",
            len(entries),
            command.audit_id,
            command.source.value,
        )
        return self._configure_weights.execute(
            ConfigureWeightsCommand(
                audit_id=command.audit_id,
                configured_by=command.copied_by,
                weights=tuple(entries),
                normalization_mode=command.normalization_mode,
            )
        )

    def _resolve_source(
        self,
        uow: UnitOfWork,
        audit: Audit,
        command: CopyWeightsCommand,
    ) -> List[StandardWeight]:
        if command.source == WeightSource.PREVIOUS_AUDIT:
            if command.source_audit_id is None:
                raise AuditValidationError(
                    "source_audit_id is required when copying from a previous audit"
                )
            if uow.audits.get(command.source_audit_id) is None:
                raise AuditNotFoundError(str(command.source_audit_id))
            weights = uow.weights.find_by_audit(command.source_audit_id)
            if not weights:
                raise AuditValidationError(
                    f"Audit {command.source_audit_id} has no configured weights"
                )
            return weights

        for candidate in uow.audits.find_by_template(audit.template_id):
            if candidate.audit_id == audit.audit_id:
                continue
            weights = uow.weights.find_by_audit(candidate.audit_id)
            if weights:
                return weights
        raise AuditValidationError(
            f"No weights configured for template {audit.template_id}"
        )

    @staticmethod
    def _map_weights(
        source_weights: List[StandardWeight],
        target_standards: List,
        command: CopyWeightsCommand,
    ) -> List[WeightEntry]:
        """Scale overlapping weights and fill standards the source lacks."""
        targets = set(target_standards)
        label = command.source.value.replace("_", " ")
        copied = [
            WeightEntry(
                standard_id=weight.standard_id,
                weight=weight.weight * command.adjustment_factor,
                justification=(
                    f"{weight.justification} (copied from {label})"
                    if weight.justification else f"Copied from {label}"
                ),
                category=weight.category,
                display_order=weight.display_order,
            )
            for weight in source_weights
            if weight.standard_id in targets
        ]
        if not copied:
            raise AuditValidationError(
                "The source weights share no standards with this audit"
            )

        fill = mean_weight(copied)
        covered = {entry.standard_id for entry in copied}
        missing = [
            WeightEntry(
                standard_id=standard_id,
                weight=fill,
                justification="Weight assigned automatically (standard not in source)",
                display_order=MISSING_STANDARD_ORDER,
            )
            for standard_id in target_standards
            if standard_id not in covered
        ]
        return copied + missing
