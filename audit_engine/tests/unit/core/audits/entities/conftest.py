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


"""Shared fixtures for entity tests."""

from datetime import date
from decimal import Decimal

import pytest

from audit_engine.core.audits.entities import ClosureStatistics, NonConformitiesCount
from audit_engine.core.audits.value_objects import AuditStatus
from audit_engine.tests.utils import TEAM_MEMBER_ID, LEAD_AUDITOR_ID, make_audit


@pytest.fixture
def draft_audit():
    """Draft audit led by LEAD_AUDITOR_ID."""
    return make_audit()


@pytest.fixture
def planned_audit():
    """Planned audit with one additional team member."""
    return make_audit(
        status=AuditStatus.PLANNED,
        audit_team_ids=[TEAM_MEMBER_ID],
        scope="Quality management system",
        end_date=date(2026, 3, 10),
    )


@pytest.fixture
def in_progress_audit():
    return make_audit(status=AuditStatus.IN_PROGRESS, scope="QMS")


@pytest.fixture
def pending_closure_audit(statistics):
    audit = make_audit(status=AuditStatus.IN_PROGRESS, scope="QMS")
    audit.request_closure(LEAD_AUDITOR_ID, statistics, report_url="https://reports/1")
    return audit


@pytest.fixture
def statistics():
    """Statistics of a fully conforming audit."""
    return ClosureStatistics(
        total_evaluations=2,
        total_findings=2,
        non_conformities_count=NonConformitiesCount(),
        conformities_percentage=Decimal("100.00"),
        requires_follow_up=False,
    )


@pytest.fixture
def plan_dates():
    return date(2026, 3, 1), date(2026, 3, 10)
