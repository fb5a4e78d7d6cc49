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


"""Unit tests for weight configuration and copy use cases."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from audit_engine.core.audits.entities import StandardRecord, StandardWeight
from audit_engine.core.audits.exceptions import (
    AuditNotFoundError,
    AuditValidationError,
    ForbiddenActionError,
    InvalidStateTransitionError,
    StandardNotFoundError,
)
from audit_engine.core.audits.services import WeightEntry
from audit_engine.core.audits.value_objects import (
    AuditId,
    AuditStatus,
    NormalizationMode,
    StandardId,
    StandardWeightId,
    TemplateId,
    WeightSource,
)
from audit_engine.orchestrator.audits.commands import (
    ConfigureWeightsCommand,
    CopyWeightsCommand,
)
from audit_engine.orchestrator.audits.use_cases import (
    ConfigureWeightsUseCase,
    CopyWeightsUseCase,
    ListWeightsUseCase,
)
from audit_engine.tests.utils import (
    LEAD_AUDITOR_ID,
    OTHER_USER_ID,
    make_audit,
    make_evaluation,
    new_id,
)


def _entries(standards, weights):
    return tuple(
        WeightEntry(
            standard_id=standard.standard_id,
            weight=Decimal(weight),
            justification=f"Weight {weight}",
            display_order=index,
        )
        for index, (standard, weight) in enumerate(zip(standards, weights))
    )


def _configure(
    uow, id_generator, audit, entries,
    mode=NormalizationMode.AUTO, user=LEAD_AUDITOR_ID,
):
    return ConfigureWeightsUseCase(uow, id_generator).execute(
        ConfigureWeightsCommand(
            audit_id=audit.audit_id,
            configured_by=user,
            weights=entries,
            normalization_mode=mode,
        )
    )


class TestConfigureWeightsUseCase:
    """Tests for ConfigureWeightsUseCase."""

    def test_auto_normalization(self, uow, id_generator, add_audit, standards):
        """Weights 2, 1, 1 are stored as 1.50, 0.75, 0.75."""
        audit = add_audit()

        result = _configure(uow, id_generator, audit, _entries(standards, ["2", "1", "1"]))

        assert [Decimal(item.weight) for item in result] == [
            Decimal("1.50"), Decimal("0.75"), Decimal("0.75")
        ]
        stored = uow.weights.find_by_audit(audit.audit_id)
        assert sum(weight.weight for weight in stored) == Decimal("3.00")
        assert uow.commits == 1

    def test_reconfiguration_replaces_whole_set(self, uow, id_generator, add_audit, standards):
        """A second configuration leaves no weight of the first one."""
        audit = add_audit(AuditStatus.PLANNED)
        first = _configure(uow, id_generator, audit, _entries(standards, ["1", "1", "1"]))
        second = _configure(uow, id_generator, audit, _entries(standards, ["3", "2", "1"]))

        stored_ids = {str(weight.weight_id) for weight in uow.weights.find_by_audit(audit.audit_id)}
        assert stored_ids == {item.weight_id for item in second}
        assert stored_ids.isdisjoint({item.weight_id for item in first})

    def test_weights_locked_after_start(self, uow, id_generator, add_audit, standards):
        audit = add_audit(AuditStatus.IN_PROGRESS)
        with pytest.raises(InvalidStateTransitionError):
            _configure(uow, id_generator, audit, _entries(standards, ["1", "1", "1"]))

    def test_only_lead_configures(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        with pytest.raises(ForbiddenActionError):
            _configure(
                uow, id_generator, audit, _entries(standards, ["1", "1", "1"]),
                user=OTHER_USER_ID,
            )

    def test_every_evaluated_standard_needs_weight(self, uow, id_generator, add_audit, standards):
        """Omitting an evaluated standard is rejected."""
        audit = add_audit()
        with pytest.raises(AuditValidationError, match="missing"):
            _configure(uow, id_generator, audit, _entries(standards[:2], ["1", "1"]))

    def test_negative_weight_rejected(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        with pytest.raises(AuditValidationError, match="negative"):
            _configure(uow, id_generator, audit, _entries(standards, ["-1", "2", "2"]))
        assert uow.weights.find_by_audit(audit.audit_id) == []

    def test_manual_weight_above_100_rejected(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        with pytest.raises(AuditValidationError, match="exceed 100"):
            _configure(
                uow, id_generator, audit, _entries(standards, ["150", "1", "1"]),
                mode=NormalizationMode.MANUAL,
            )

    def test_unknown_standard_is_not_found(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        extra = WeightEntry(standard_id=new_id(StandardId), weight=Decimal("1"))
        with pytest.raises(StandardNotFoundError):
            _configure(
                uow, id_generator, audit, _entries(standards, ["1", "1", "1"]) + (extra,)
            )

    def test_standard_of_other_template_rejected(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        foreign = StandardRecord(new_id(StandardId), new_id(TemplateId))
        uow.standards.add(foreign)
        entries = _entries(standards, ["1", "1", "1"]) + (
            WeightEntry(standard_id=foreign.standard_id, weight=Decimal("1")),
        )
        with pytest.raises(AuditValidationError, match="template"):
            _configure(uow, id_generator, audit, entries)

    def test_heading_standard_rejected(self, uow, id_generator, add_audit, standards):
        """Only auditable standards of the template can carry a weight."""
        audit = add_audit()
        heading = StandardRecord(new_id(StandardId), audit.template_id, is_auditable=False)
        uow.standards.add(heading)
        entries = _entries(standards, ["1", "1", "1"]) + (
            WeightEntry(standard_id=heading.standard_id, weight=Decimal("1")),
        )
        with pytest.raises(AuditValidationError, match="not auditable"):
            _configure(uow, id_generator, audit, entries)

    def test_manual_weights_rounded_to_stored_precision(
        self, uow, id_generator, add_audit, standards
    ):
        """The response carries the same four-place value that is stored."""
        audit = add_audit()

        result = _configure(
            uow, id_generator, audit, _entries(standards, ["1.23456", "2", "0.33335"]),
            mode=NormalizationMode.MANUAL,
        )

        assert [item.weight for item in result] == ["1.2346", "2.0000", "0.3334"]
        stored = uow.weights.find_by_audit(audit.audit_id)
        assert [str(weight.weight) for weight in stored] == [item.weight for item in result]

    def test_audit_without_evaluations_rejected(self, uow, id_generator, standards):
        """Weights need the evaluation set to exist first."""
        audit = make_audit()
        uow.audits.add(audit)
        with pytest.raises(AuditValidationError, match="no evaluations"):
            _configure(uow, id_generator, audit, _entries(standards, ["1", "1", "1"]))

    def test_list_weights_in_display_order(self, uow, id_generator, add_audit, standards):
        audit = add_audit()
        _configure(uow, id_generator, audit, _entries(standards, ["1", "2", "3"]))
        listed = ListWeightsUseCase(uow).execute(audit.audit_id)
        assert [item.display_order for item in listed] == [0, 1, 2]


class TestCopyWeightsUseCase:
    """Tests for CopyWeightsUseCase."""

    def _copy(self, uow, id_generator, audit, **overrides):
        values = dict(
            audit_id=audit.audit_id,
            source=WeightSource.TEMPLATE,
            copied_by=LEAD_AUDITOR_ID,
        )
        values.update(overrides)
        configure = ConfigureWeightsUseCase(uow, id_generator)
        return CopyWeightsUseCase(uow, configure).execute(CopyWeightsCommand(**values))

    @pytest.fixture
    def source_audit(self, uow, add_audit, standards):
        """Older closed audit of the same template with weights 2, 1, 1."""
        audit = add_audit(
            AuditStatus.CLOSED,
            created_at=datetime.now(timezone.utc) - timedelta(days=30),
        )
        uow.weights.replace_for_audit(
            audit.audit_id,
            [
                StandardWeight(
                    weight_id=new_id(StandardWeightId),
                    audit_id=audit.audit_id,
                    standard_id=standard.standard_id,
                    weight=Decimal(weight),
                    configured_by=LEAD_AUDITOR_ID,
                    justification="Core clause" if index == 0 else None,
                    category="core",
                    display_order=index,
                )
                for index, (standard, weight) in enumerate(zip(standards, ["2", "1", "1"]))
            ],
        )
        return audit

    def test_copy_from_template_uses_latest_weighted_audit(
        self, uow, id_generator, add_audit, source_audit
    ):
        """The most recent other audit of the template supplies the weights."""
        target = add_audit()

        result = self._copy(uow, id_generator, target, normalization_mode=NormalizationMode.MANUAL)

        assert sorted(Decimal(item.weight) for item in result) == [
            Decimal("1"), Decimal("1"), Decimal("2")
        ]
        justifications = {item.justification for item in result}
        assert "Core clause (copied from template)" in justifications
        assert "Copied from template" in justifications

    def test_adjustment_factor_scales_weights(self, uow, id_generator, add_audit, source_audit):
        target = add_audit()
        result = self._copy(
            uow, id_generator, target,
            adjustment_factor=Decimal("1.5"),
            normalization_mode=NormalizationMode.MANUAL,
        )
        assert sorted(Decimal(item.weight) for item in result) == [
            Decimal("1.5"), Decimal("1.5"), Decimal("3.0")
        ]

    def test_missing_standards_get_mean_weight(
        self, uow, id_generator, add_audit, source_audit, standards
    ):
        """A standard absent from the source receives the mean copied weight."""
        target = add_audit()
        extra = StandardRecord(new_id(StandardId), source_audit.template_id)
        uow.standards.add(extra)
        uow.evaluations.save(make_evaluation(target.audit_id, standard_id=extra.standard_id))

        result = self._copy(uow, id_generator, target, normalization_mode=NormalizationMode.MANUAL)

        filled = [item for item in result if item.standard_id == str(extra.standard_id)]
        assert len(filled) == 1
        assert filled[0].weight == "1.3333"
        assert filled[0].display_order == 999
        assert "automatically" in filled[0].justification

    def test_copy_from_previous_audit(
        self, uow, id_generator, add_audit, source_audit, standards
    ):
        """A 2:1:1 source keeps its proportions after auto-normalization."""
        target = add_audit()
        result = self._copy(
            uow, id_generator, target,
            source=WeightSource.PREVIOUS_AUDIT,
            source_audit_id=source_audit.audit_id,
        )
        by_standard = {item.standard_id: Decimal(item.weight) for item in result}
        assert by_standard == {
            str(standards[0].standard_id): Decimal("1.50"),
            str(standards[1].standard_id): Decimal("0.75"),
            str(standards[2].standard_id): Decimal("0.75"),
        }

    def test_previous_audit_requires_source_id(self, uow, id_generator, add_audit):
        target = add_audit()
        with pytest.raises(AuditValidationError, match="source_audit_id"):
            self._copy(uow, id_generator, target, source=WeightSource.PREVIOUS_AUDIT)

    def test_previous_audit_must_exist(self, uow, id_generator, add_audit):
        target = add_audit()
        with pytest.raises(AuditNotFoundError):
            self._copy(
                uow, id_generator, target,
                source=WeightSource.PREVIOUS_AUDIT,
                source_audit_id=new_id(AuditId),
            )

    def test_template_without_weights(self, uow, id_generator, add_audit):
        """No earlier weighted audit of the template is a validation error."""
        target = add_audit()
        with pytest.raises(AuditValidationError, match="No weights"):
            self._copy(uow, id_generator, target)

    def test_adjustment_factor_lower_bound(self, uow, id_generator, add_audit, source_audit):
        target = add_audit()
        with pytest.raises(AuditValidationError, match="Adjustment factor"):
            self._copy(uow, id_generator, target, adjustment_factor=Decimal("0.05"))

    def test_copy_into_started_audit_rejected(self, uow, id_generator, add_audit, source_audit):
        target = add_audit(AuditStatus.IN_PROGRESS)
        with pytest.raises(InvalidStateTransitionError):
            self._copy(uow, id_generator, target)
