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


"""Unit tests for audit value objects."""

from decimal import Decimal

import pytest

from audit_engine.core.audits.value_objects import (
    ActionPlanStatus,
    AuditId,
    AuditStatus,
    ComplianceStatus,
    UserId,
    round2,
    to_decimal,
)


class TestEntityId:
    """Tests for UUID based identifiers."""

    def test_valid_id_is_canonicalized(self):
        """Upper-case UUIDs should be stored in canonical lower-case form."""
        audit_id = AuditId("018F3C4C-6A2E-7B2A-9C2A-3D8D2C4B9A11")
        assert audit_id.value == "018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a11"
        assert str(audit_id) == audit_id.value

    def test_equal_ids_are_equal_and_hashable(self):
        """Ids with the same value should compare and hash equal."""
        first = UserId("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a11")
        second = UserId("018F3C4C-6A2E-7B2A-9C2A-3D8D2C4B9A11")
        assert first == second
        assert len({first, second}) == 1

    def test_invalid_uuid_raises_value_error(self):
        """Non-UUID values should be rejected."""
        with pytest.raises(ValueError, match="Invalid UUID format"):
            AuditId("not-a-uuid")

    def test_too_long_value_raises_value_error(self):
        """Values longer than a UUID string should be rejected."""
        with pytest.raises(ValueError, match="cannot exceed"):
            AuditId("0" * 37)

    def test_non_string_raises_value_error(self):
        """Non-string values should be rejected."""
        with pytest.raises(ValueError):
            AuditId(123)


class TestStatuses:
    """Tests for status enums."""

    @pytest.mark.parametrize("status", [AuditStatus.CLOSED, AuditStatus.CANCELLED])
    def test_terminal_audit_statuses(self, status):
        """CLOSED and CANCELLED are terminal."""
        assert status.is_terminal()

    @pytest.mark.parametrize(
        "status",
        [
            AuditStatus.DRAFT,
            AuditStatus.PLANNED,
            AuditStatus.IN_PROGRESS,
            AuditStatus.PENDING_CLOSURE,
        ],
    )
    def test_non_terminal_audit_statuses(self, status):
        """Every other audit status accepts further commands."""
        assert not status.is_terminal()

    def test_non_conformity_classification(self):
        """Only minor and major non-conformities count as non-conformities."""
        assert ComplianceStatus.MAJOR_NON_CONFORMITY.is_non_conformity()
        assert ComplianceStatus.MINOR_NON_CONFORMITY.is_non_conformity()
        assert not ComplianceStatus.OBSERVATION.is_non_conformity()
        assert not ComplianceStatus.CONFORMING.is_non_conformity()

    def test_remediation_covering_action_plan_statuses(self):
        """Only APPROVED and IN_PROGRESS plans cover a major finding."""
        covering = {status for status in ActionPlanStatus if status.covers_remediation()}
        assert covering == {ActionPlanStatus.APPROVED, ActionPlanStatus.IN_PROGRESS}


class TestDecimalHelpers:
    """Tests for decimal conversion and rounding."""

    def test_round2_rounds_half_up(self):
        """0.125 rounds to 0.13, not banker's 0.12."""
        assert round2(Decimal("0.125")) == Decimal("0.13")

    def test_round2_keeps_two_places(self):
        """Integers gain two decimal places."""
        assert str(round2(1)) == "1.00"

    def test_to_decimal_avoids_float_artifacts(self):
        """Floats convert through their shortest repr."""
        assert to_decimal(0.1) == Decimal("0.1")
