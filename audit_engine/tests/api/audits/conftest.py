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


"""Fixtures for the audit HTTP API tests.

The application runs against an in-memory SQLite database seeded with two
users, two auditable standards of TEMPLATE_ID and one maturity level.
"""

from decimal import Decimal
from typing import Dict, Generator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from audit_engine.config import Settings
from audit_engine.core.audits.value_objects import MaturityLevelId, StandardId
from audit_engine.infra.persistence.models import (
    EvaluationRow,
    MaturityLevelRow,
    StandardRow,
    UserRow,
)
from audit_engine.main import create_app
from audit_engine.tests.utils import (
    FRAMEWORK_ID,
    LEAD_AUDITOR_ID,
    ORGANIZATION_ID,
    TEAM_MEMBER_ID,
    TEMPLATE_ID,
    new_id,
)


@pytest.fixture
def app():
    """Create an application bound to a fresh in-memory database."""
    application = create_app(Settings(database_url="sqlite://"))
    yield application
    application.state.engine.dispose()


@pytest.fixture
def seed(app) -> Dict:
    """Insert the reference data the audit endpoints rely on.

    Returns:
        Dictionary with the seeded standard ids and maturity level id.
    """
    standard_ids = [new_id(StandardId) for _ in range(2)]
    level_id = new_id(MaturityLevelId)
    with app.state.session_factory() as session:
        session.add_all([
            UserRow(id=str(LEAD_AUDITOR_ID), username="lead.auditor"),
            UserRow(id=str(TEAM_MEMBER_ID), username="team.member"),
        ])
        session.add_all(
            StandardRow(
                id=str(standard_id),
                template_id=str(TEMPLATE_ID),
                code=f"7.{index + 1}",
                display_order=index,
            )
            for index, standard_id in enumerate(standard_ids)
        )
        session.add(MaturityLevelRow(
            id=str(level_id),
            framework_id=str(FRAMEWORK_ID),
            name="Managed",
            score=Decimal("4.00"),
            observations="Process is measured",
        ))
        session.commit()
    return {"standard_ids": standard_ids, "level_id": level_id}


@pytest.fixture
def test_client(app, seed) -> Generator:
    """Create a FastAPI TestClient for the seeded application.

    Yields:
        TestClient configured for testing.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def lead_headers() -> Dict[str, str]:
    return {"X-User-Id": str(LEAD_AUDITOR_ID)}


@pytest.fixture
def member_headers() -> Dict[str, str]:
    return {"X-User-Id": str(TEAM_MEMBER_ID)}


@pytest.fixture
def create_request() -> Dict:
    return {
        "name": "ISO 9001 surveillance",
        "template_id": str(TEMPLATE_ID),
        "framework_id": str(FRAMEWORK_ID),
        "organization_id": str(ORGANIZATION_ID),
        "lead_auditor_id": str(LEAD_AUDITOR_ID),
        "start_date": "2026-03-01",
    }


@pytest.fixture
def plan_request() -> Dict:
    return {
        "lead_auditor_id": str(LEAD_AUDITOR_ID),
        "auditor_ids": [str(TEAM_MEMBER_ID)],
        "scheduled_start_date": "2026-03-02",
        "scheduled_end_date": "2026-03-13",
        "scope": "Manufacturing site",
    }


@pytest.fixture
def evaluation_ids(app):
    """Return a callable listing the evaluation ids of an audit."""

    def _ids(audit_id: str) -> List[str]:
        with app.state.session_factory() as session:
            return list(session.execute(
                select(EvaluationRow.id)
                .where(EvaluationRow.audit_id == audit_id)
                .order_by(EvaluationRow.created_at, EvaluationRow.id)
            ).scalars())

    return _ids
