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


"""Shared fixtures for use case tests."""

import copy
import uuid
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Set

import pytest

from audit_engine.core.audits.entities import (
    ActionPlan,
    Audit,
    Evaluation,
    MaturityLevel,
    StandardRecord,
    StandardWeight,
)
from audit_engine.core.audits.exceptions import OptimisticLockError
from audit_engine.core.audits.repositories import IdGenerator
from audit_engine.core.audits.value_objects import (
    AuditId,
    AuditStatus,
    ComplianceStatus,
    EvaluationId,
    MaturityLevelId,
    StandardId,
    TemplateId,
    UserId,
)
from audit_engine.tests.utils import (
    FRAMEWORK_ID,
    LEAD_AUDITOR_ID,
    OTHER_USER_ID,
    TEAM_MEMBER_ID,
    TEMPLATE_ID,
    make_audit,
    make_evaluation,
    new_id,
)


class FakeAuditRepository:
    """In-memory fake implementation of AuditRepository.

    Stores copies so callers only see persisted state through ``get``.
    """

    def __init__(self) -> None:
        self._audits: Dict[str, Audit] = {}

    def add(self, audit: Audit) -> None:
        self._audits[str(audit.audit_id)] = copy.deepcopy(audit)

    def get(self, audit_id: AuditId, for_update: bool = False) -> Optional[Audit]:
        audit = self._audits.get(str(audit_id))
        if audit is None or not audit.is_active:
            return None
        return copy.deepcopy(audit)

    def save(self, audit: Audit) -> None:
        stored = self._audits[str(audit.audit_id)]
        if stored.version != audit.version - 1:
            raise OptimisticLockError(
                "Audit", str(audit.audit_id), audit.version - 1, stored.version
            )
        self._audits[str(audit.audit_id)] = copy.deepcopy(audit)

    def save_metrics(self, audit: Audit) -> None:
        stored = self._audits[str(audit.audit_id)]
        stored.progress = audit.progress
        stored.total_score = audit.total_score

    def find_by_template(self, template_id: TemplateId) -> List[Audit]:
        audits = [
            audit for audit in self._audits.values()
            if audit.template_id == template_id and audit.is_active
        ]
        return [
            copy.deepcopy(audit)
            for audit in sorted(audits, key=lambda a: a.created_at, reverse=True)
        ]


class FakeEvaluationRepository:
    """In-memory fake implementation of EvaluationRepository."""

    def __init__(self) -> None:
        self._evaluations: Dict[str, Evaluation] = {}

    def get(self, evaluation_id: EvaluationId) -> Optional[Evaluation]:
        evaluation = self._evaluations.get(str(evaluation_id))
        return copy.deepcopy(evaluation) if evaluation else None

    def find_active_by_audit(self, audit_id: AuditId) -> List[Evaluation]:
        return [
            copy.deepcopy(e) for e in self._evaluations.values()
            if e.audit_id == audit_id and e.is_active
        ]

    def find_by_audit_and_status(
        self,
        audit_id: AuditId,
        statuses: Sequence[ComplianceStatus],
    ) -> List[Evaluation]:
        return [
            e for e in self.find_active_by_audit(audit_id)
            if e.compliance_status in statuses
        ]

    def save(self, evaluation: Evaluation) -> None:
        self._evaluations[str(evaluation.evaluation_id)] = copy.deepcopy(evaluation)

    def save_all(self, evaluations: Sequence[Evaluation]) -> None:
        for evaluation in evaluations:
            self.save(evaluation)


class FakeActionPlanRepository:
    """In-memory fake implementation of ActionPlanRepository."""

    def __init__(self) -> None:
        self._plans: Dict[str, ActionPlan] = {}

    def find_by_evaluations(self, evaluation_ids: Iterable[EvaluationId]) -> List[ActionPlan]:
        ids = set(evaluation_ids)
        return [plan for plan in self._plans.values() if plan.evaluation_id in ids]

    def save(self, action_plan: ActionPlan) -> None:
        self._plans[str(action_plan.action_plan_id)] = action_plan


class FakeStandardWeightRepository:
    """In-memory fake implementation of StandardWeightRepository."""

    def __init__(self) -> None:
        self._weights: Dict[str, List[StandardWeight]] = {}

    def find_by_audit(self, audit_id: AuditId) -> List[StandardWeight]:
        return sorted(
            self._weights.get(str(audit_id), []), key=lambda w: w.display_order
        )

    def replace_for_audit(self, audit_id: AuditId, weights: Sequence[StandardWeight]) -> None:
        self._weights[str(audit_id)] = list(weights)


class FakeUserDirectory:
    def __init__(self, user_ids: Iterable[UserId]) -> None:
        self._users: Set[UserId] = set(user_ids)

    def exists(self, user_id: UserId) -> bool:
        return user_id in self._users

    def find_existing(self, user_ids: Iterable[UserId]) -> Set[UserId]:
        return {user_id for user_id in user_ids if user_id in self._users}


class FakeStandardDirectory:
    def __init__(self) -> None:
        self._standards: Dict[StandardId, StandardRecord] = {}

    def add(self, record: StandardRecord) -> None:
        self._standards[record.standard_id] = record

    def find_by_ids(self, standard_ids: Iterable[StandardId]) -> List[StandardRecord]:
        return [self._standards[s] for s in standard_ids if s in self._standards]

    def find_auditable_by_template(self, template_id: TemplateId) -> List[StandardRecord]:
        return [
            record for record in self._standards.values()
            if record.template_id == template_id and record.is_auditable
        ]


class FakeMaturityLevelDirectory:
    def __init__(self) -> None:
        self._levels: Dict[MaturityLevelId, MaturityLevel] = {}

    def add(self, level: MaturityLevel) -> None:
        self._levels[level.level_id] = level

    def get(self, level_id: MaturityLevelId) -> Optional[MaturityLevel]:
        return self._levels.get(level_id)


class FakeUnitOfWork:
    """In-memory unit of work counting commits and rollbacks."""

    def __init__(self) -> None:
        self.audits = FakeAuditRepository()
        self.evaluations = FakeEvaluationRepository()
        self.action_plans = FakeActionPlanRepository()
        self.weights = FakeStandardWeightRepository()
        self.users = FakeUserDirectory([LEAD_AUDITOR_ID, TEAM_MEMBER_ID, OTHER_USER_ID])
        self.standards = FakeStandardDirectory()
        self.maturity_levels = FakeMaturityLevelDirectory()
        self.commits = 0
        self.rollbacks = 0

    def __enter__(self) -> "FakeUnitOfWork":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is not None:
            self.rollback()

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakeIdGenerator(IdGenerator):
    """Fake id generator yielding predictable UUIDs."""

    def __init__(self) -> None:
        self._counter = 1

    def generate(self) -> uuid.UUID:
        generated = uuid.UUID(f"123e4567-e89b-12d3-a456-426614174{self._counter:03d}")
        self._counter += 1
        return generated


@pytest.fixture
def uow():
    """Provide fake unit of work."""
    return FakeUnitOfWork()


@pytest.fixture
def id_generator():
    """Provide fake id generator."""
    return FakeIdGenerator()


@pytest.fixture
def standards(uow):
    """Three auditable standards of TEMPLATE_ID plus one heading."""
    records = [StandardRecord(new_id(StandardId), TEMPLATE_ID) for _ in range(3)]
    for record in records:
        uow.standards.add(record)
    uow.standards.add(StandardRecord(new_id(StandardId), TEMPLATE_ID, is_auditable=False))
    return records


@pytest.fixture
def maturity_level(uow):
    level = MaturityLevel(
        level_id=new_id(MaturityLevelId),
        framework_id=FRAMEWORK_ID,
        score=Decimal("4.00"),
        observations="Managed",
        recommendations="Keep measuring",
    )
    uow.maturity_levels.add(level)
    return level


@pytest.fixture
def add_audit(uow, standards):
    """Store an audit in the given state with one evaluation per standard."""

    def _add(status: AuditStatus = AuditStatus.DRAFT, **overrides) -> Audit:
        values = dict(status=status)
        if status != AuditStatus.DRAFT:
            values.update(
                scope="Quality management system",
                audit_team_ids=[TEAM_MEMBER_ID],
                end_date=date(2026, 3, 10),
            )
        values.update(overrides)
        audit = make_audit(**values)
        uow.audits.add(audit)
        uow.evaluations.save_all(
            [make_evaluation(audit.audit_id, standard_id=s.standard_id) for s in standards]
        )
        return audit

    return _add


@pytest.fixture
def finish_evaluations(uow):
    """Complete and classify an audit's evaluations in order."""

    def _finish(audit_id, statuses):
        evaluations = uow.evaluations.find_active_by_audit(audit_id)
        for evaluation, status in zip(evaluations, statuses):
            evaluation.maturity_level_id = new_id(MaturityLevelId)
            evaluation.score = Decimal("3")
            evaluation.is_completed = True
            evaluation.compliance_status = status
            uow.evaluations.save(evaluation)
        return evaluations

    return _finish
