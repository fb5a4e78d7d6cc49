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


"""SQLAlchemy implementations of the audit repositories and directories."""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from audit_engine.core.audits.entities import (
    ActionPlan,
    Audit,
    Evaluation,
    MaturityLevel,
    StandardRecord,
    StandardWeight,
)
from audit_engine.core.audits.exceptions import OptimisticLockError
from audit_engine.core.audits.value_objects import (
    AuditId,
    ComplianceStatus,
    EvaluationId,
    MaturityLevelId,
    StandardId,
    TemplateId,
    UserId,
)

from .mappers import (
    action_plan_from_row,
    action_plan_to_row,
    audit_from_row,
    audit_to_row,
    audit_values,
    evaluation_from_row,
    evaluation_to_row,
    maturity_level_from_row,
    standard_from_row,
    weight_from_row,
    weight_to_row,
)
from .models import (
    ActionPlanRow,
    AuditRow,
    AuditTeamMemberRow,
    EvaluationRow,
    MaturityLevelRow,
    StandardRow,
    StandardWeightRow,
    UserRow,
)

logger = logging.getLogger(__name__)


class SqlAlchemyAuditRepository:
    """Audit repository with versioned writes.

    ``get`` remembers the version it read; ``save`` only updates the row if
    that version is still current, so a write based on a stale read fails
    with OptimisticLockError instead of silently overwriting.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._loaded_versions: Dict[str, int] = {}

    def add(self, audit: Audit) -> None:
        self._session.add(audit_to_row(audit))
        self._session.flush()
        self._write_team(audit)
        self._session.flush()
        self._loaded_versions[str(audit.audit_id)] = audit.version

    def get(self, audit_id: AuditId, for_update: bool = False) -> Optional[Audit]:
        stmt = (
            select(AuditRow)
            .where(AuditRow.id == str(audit_id), AuditRow.is_active.is_(True))
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).scalar_one_or_none()
        if row is None:
            return None
        self._loaded_versions[row.id] = row.version
        return audit_from_row(row, self._team_ids(row.id))

    def save(self, audit: Audit) -> None:
        key = str(audit.audit_id)
        expected = self._loaded_versions.get(key, audit.version - 1)
        result = self._session.execute(
            update(AuditRow)
            .where(AuditRow.id == key, AuditRow.version == expected)
            .values(**audit_values(audit))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            actual = self._session.execute(
                select(AuditRow.version).where(AuditRow.id == key)
            ).scalar_one_or_none()
            logger.warning(
                "Version conflict on audit %s: expected %s, found %s",
                key, expected, actual,
            )
            raise OptimisticLockError(
                entity_type="Audit",
                entity_id=key,
                expected_version=expected,
                actual_version=actual,
            )
        self._session.execute(
            delete(AuditTeamMemberRow).where(AuditTeamMemberRow.audit_id == key)
        )
        self._write_team(audit)
        self._session.flush()
        self._loaded_versions[key] = audit.version

    def save_metrics(self, audit: Audit) -> None:
        self._session.execute(
            update(AuditRow)
            .where(AuditRow.id == str(audit.audit_id))
            .values(
                progress=audit.progress,
                total_score=audit.total_score,
                updated_at=audit.updated_at,
            )
            .execution_options(synchronize_session=False)
        )

    def find_by_template(self, template_id: TemplateId) -> List[Audit]:
        rows = self._session.execute(
            select(AuditRow)
            .where(AuditRow.template_id == str(template_id), AuditRow.is_active.is_(True))
            .order_by(AuditRow.created_at.desc())
        ).scalars().all()
        return [audit_from_row(row, self._team_ids(row.id)) for row in rows]

    def _team_ids(self, audit_id: str) -> List[str]:
        return list(self._session.execute(
            select(AuditTeamMemberRow.user_id)
            .where(AuditTeamMemberRow.audit_id == audit_id)
            .order_by(AuditTeamMemberRow.position)
        ).scalars())

    def _write_team(self, audit: Audit) -> None:
        self._session.add_all(
            AuditTeamMemberRow(audit_id=str(audit.audit_id), user_id=str(member), position=index)
            for index, member in enumerate(audit.audit_team_ids)
        )


class SqlAlchemyEvaluationRepository:
    """Evaluation repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, evaluation_id: EvaluationId) -> Optional[Evaluation]:
        row = self._session.get(EvaluationRow, str(evaluation_id), populate_existing=True)
        return evaluation_from_row(row) if row is not None else None

    def find_active_by_audit(self, audit_id: AuditId) -> List[Evaluation]:
        rows = self._session.execute(
            select(EvaluationRow)
            .where(EvaluationRow.audit_id == str(audit_id), EvaluationRow.is_active.is_(True))
            .order_by(EvaluationRow.created_at, EvaluationRow.id)
        ).scalars().all()
        return [evaluation_from_row(row) for row in rows]

    def find_by_audit_and_status(
        self,
        audit_id: AuditId,
        statuses: Sequence[ComplianceStatus],
    ) -> List[Evaluation]:
        rows = self._session.execute(
            select(EvaluationRow)
            .where(
                EvaluationRow.audit_id == str(audit_id),
                EvaluationRow.is_active.is_(True),
                EvaluationRow.compliance_status.in_(list(statuses)),
            )
            .order_by(EvaluationRow.created_at, EvaluationRow.id)
        ).scalars().all()
        return [evaluation_from_row(row) for row in rows]

    def save(self, evaluation: Evaluation) -> None:
        self._session.merge(evaluation_to_row(evaluation))
        self._session.flush()

    def save_all(self, evaluations: Sequence[Evaluation]) -> None:
        self._session.add_all(evaluation_to_row(evaluation) for evaluation in evaluations)
        self._session.flush()


class SqlAlchemyActionPlanRepository:
    """Action plan repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_evaluations(self, evaluation_ids: Iterable[EvaluationId]) -> List[ActionPlan]:
        ids = [str(evaluation_id) for evaluation_id in evaluation_ids]
        if not ids:
            return []
        rows = self._session.execute(
            select(ActionPlanRow)
            .where(ActionPlanRow.evaluation_id.in_(ids), ActionPlanRow.is_active.is_(True))
        ).scalars().all()
        return [action_plan_from_row(row) for row in rows]

    def save(self, action_plan: ActionPlan) -> None:
        self._session.merge(action_plan_to_row(action_plan))
        self._session.flush()


class SqlAlchemyStandardWeightRepository:
    """Standard weight repository; the set of an audit is replaced as a whole."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_audit(self, audit_id: AuditId) -> List[StandardWeight]:
        rows = self._session.execute(
            select(StandardWeightRow)
            .where(StandardWeightRow.audit_id == str(audit_id))
            .order_by(StandardWeightRow.display_order, StandardWeightRow.standard_id)
        ).scalars().all()
        return [weight_from_row(row) for row in rows]

    def replace_for_audit(self, audit_id: AuditId, weights: Sequence[StandardWeight]) -> None:
        self._session.execute(
            delete(StandardWeightRow).where(StandardWeightRow.audit_id == str(audit_id))
        )
        self._session.add_all(weight_to_row(weight) for weight in weights)
        self._session.flush()


class SqlAlchemyUserDirectory:
    def __init__(self, session: Session) -> None:
        self._session = session

    def exists(self, user_id: UserId) -> bool:
        return self._session.execute(
            select(UserRow.id).where(UserRow.id == str(user_id), UserRow.is_active.is_(True))
        ).first() is not None

    def find_existing(self, user_ids: Iterable[UserId]) -> Set[UserId]:
        ids = {str(user_id) for user_id in user_ids}
        if not ids:
            return set()
        found = self._session.execute(
            select(UserRow.id).where(UserRow.id.in_(ids), UserRow.is_active.is_(True))
        ).scalars()
        return {UserId(user_id) for user_id in found}


class SqlAlchemyStandardDirectory:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_ids(self, standard_ids: Iterable[StandardId]) -> List[StandardRecord]:
        ids = [str(standard_id) for standard_id in standard_ids]
        if not ids:
            return []
        rows = self._session.execute(
            select(StandardRow).where(StandardRow.id.in_(ids), StandardRow.is_active.is_(True))
        ).scalars().all()
        return [standard_from_row(row) for row in rows]

    def find_auditable_by_template(self, template_id: TemplateId) -> List[StandardRecord]:
        rows = self._session.execute(
            select(StandardRow)
            .where(
                StandardRow.template_id == str(template_id),
                StandardRow.is_active.is_(True),
                StandardRow.is_auditable.is_(True),
            )
            .order_by(StandardRow.display_order, StandardRow.code)
        ).scalars().all()
        return [standard_from_row(row) for row in rows]


class SqlAlchemyMaturityLevelDirectory:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, level_id: MaturityLevelId) -> Optional[MaturityLevel]:
        row = self._session.get(MaturityLevelRow, str(level_id))
        return maturity_level_from_row(row) if row is not None else None
