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


"""Unit tests for Evaluation entity."""

from decimal import Decimal

import pytest

from audit_engine.core.audits.entities import MaturityLevel
from audit_engine.core.audits.exceptions import AuditValidationError
from audit_engine.core.audits.value_objects import (
    AuditId,
    ComplianceStatus,
    MaturityLevelId,
)
from audit_engine.tests.utils import FRAMEWORK_ID, LEAD_AUDITOR_ID, make_evaluation, new_id


@pytest.fixture
def evaluation():
    return make_evaluation(new_id(AuditId))


@pytest.fixture
def level():
    return MaturityLevel(
        level_id=new_id(MaturityLevelId),
        framework_id=FRAMEWORK_ID,
        score=Decimal("3.50"),
        observations="Process defined",
        recommendations="Automate checks",
    )


class TestEvaluation:
    """Tests for Evaluation entity."""

    def test_assign_level_copies_score_and_texts(self, evaluation, level):
        """The level's score and default texts are copied."""
        evaluation.assign_maturity_level(level)
        assert evaluation.maturity_level_id == level.level_id
        assert evaluation.score == Decimal("3.50")
        assert evaluation.observations == "Process defined"
        assert evaluation.recommendations == "Automate checks"

    def test_caller_texts_win_over_level_defaults(self, evaluation, level):
        """Supplied observations replace the level's text."""
        evaluation.assign_maturity_level(level, observations="Seen on site")
        assert evaluation.observations == "Seen on site"
        assert evaluation.recommendations == "Automate checks"

    def test_record_evaluator_keeps_first_timestamp(self, evaluation):
        """evaluated_at is stamped only the first time."""
        evaluation.record_evaluator(LEAD_AUDITOR_ID)
        first = evaluation.evaluated_at
        evaluation.record_evaluator(LEAD_AUDITOR_ID)
        assert evaluation.evaluated_at == first

    def test_complete_requires_maturity_level(self, evaluation):
        """Completing without a level is rejected."""
        with pytest.raises(AuditValidationError, match="maturity level"):
            evaluation.complete()
        assert evaluation.is_completed is False

    def test_complete_after_level_assignment(self, evaluation, level):
        evaluation.assign_maturity_level(level)
        evaluation.complete()
        assert evaluation.is_completed is True

    def test_major_non_conformity_detection(self, evaluation):
        evaluation.classify(ComplianceStatus.MAJOR_NON_CONFORMITY)
        assert evaluation.is_major_non_conformity()
        evaluation.classify(ComplianceStatus.MINOR_NON_CONFORMITY)
        assert not evaluation.is_major_non_conformity()
