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


"""Repository and directory port interfaces (Protocols) for the Audit domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

import uuid
from typing import Iterable, List, Optional, Protocol, Sequence, Set

from .entities import (
    ActionPlan,
    Audit,
    Evaluation,
    MaturityLevel,
    StandardRecord,
    StandardWeight,
)
from .value_objects import (
    AuditId,
    ComplianceStatus,
    EvaluationId,
    MaturityLevelId,
    StandardId,
    TemplateId,
    UserId,
)


class IdGenerator(Protocol):
    """Generator port for entity identifiers."""

    def generate(self) -> uuid.UUID:
        """Generate a new unique UUID."""
        ...


class AuditRepository(Protocol):
    """Repository port for Audit aggregate persistence."""

    def add(self, audit: Audit) -> None:
        """Persist a new audit aggregate."""
        ...

    def get(self, audit_id: AuditId, for_update: bool = False) -> Optional[Audit]:
        """Retrieve an active audit by its identifier.

        Args:
            audit_id: Unique audit identifier.
            for_update: Lock the aggregate row until the unit of work ends.

        Returns:
            Audit entity if found and active, None otherwise.
        """
        ...

    def save(self, audit: Audit) -> None:
        """Persist lifecycle changes of a previously loaded audit.

        Raises:
            OptimisticLockError: If the stored version moved since the audit
                was loaded.
        """
        ...

    def save_metrics(self, audit: Audit) -> None:
        """Persist only ``progress`` and ``total_score`` (last writer wins)."""
        ...

    def find_by_template(self, template_id: TemplateId) -> List[Audit]:
        """Retrieve active audits of a template, most recently created first."""
        ...


class EvaluationRepository(Protocol):
    """Repository port for Evaluation persistence."""

    def get(self, evaluation_id: EvaluationId) -> Optional[Evaluation]:
        """Retrieve an active evaluation by identifier."""
        ...

    def find_active_by_audit(self, audit_id: AuditId) -> List[Evaluation]:
        """Retrieve all active evaluations of an audit (may be empty)."""
        ...

    def find_by_audit_and_status(
        self,
        audit_id: AuditId,
        statuses: Iterable[ComplianceStatus]
    ) -> List[Evaluation]:
        """Retrieve active evaluations of an audit with one of ``statuses``."""
        ...

    def save(self, evaluation: Evaluation) -> None:
        ...

    def save_all(self, evaluations: Sequence[Evaluation]) -> None:
        """Persist multiple evaluations in the current unit of work."""
        ...


class ActionPlanRepository(Protocol):
    """Repository port for ActionPlan persistence."""

    def find_by_evaluations(
        self,
        evaluation_ids: Iterable[EvaluationId]
    ) -> List[ActionPlan]:
        """Retrieve active action plans attached to any of the evaluations."""
        ...

    def save(self, action_plan: ActionPlan) -> None:
        ...


class StandardWeightRepository(Protocol):
    """Repository port for StandardWeight persistence."""

    def find_by_audit(self, audit_id: AuditId) -> List[StandardWeight]:
        """Retrieve the weight set of an audit ordered by display order."""
        ...

    def replace_for_audit(
        self,
        audit_id: AuditId,
        weights: Sequence[StandardWeight]
    ) -> None:
        """Replace the whole weight set of an audit (delete then insert).

        Must run inside the caller's unit of work so readers never observe
        an empty set mid-replacement.
        """
        ...


class UserDirectory(Protocol):
    """Directory port used for user existence checks only."""

    def exists(self, user_id: UserId) -> bool:
        ...

    def find_existing(self, user_ids: Iterable[UserId]) -> Set[UserId]:
        """Return the subset of ``user_ids`` that resolve to active users."""
        ...


class StandardDirectory(Protocol):
    """Directory port resolving standards and their owning template."""

    def find_by_ids(self, standard_ids: Iterable[StandardId]) -> List[StandardRecord]:
        """Return the records of the standards that exist."""
        ...

    def find_auditable_by_template(self, template_id: TemplateId) -> List[StandardRecord]:
        """Return active, auditable standards of a template."""
        ...


class MaturityLevelDirectory(Protocol):
    """Directory port resolving maturity levels."""

    def get(self, level_id: MaturityLevelId) -> Optional[MaturityLevel]:
        ...


class UnitOfWork(Protocol):
    """Transactional boundary for one logical operation.

    Entering the unit of work opens a transaction; leaving it without
    ``commit()`` rolls back. Repositories exposed here share the transaction.
    """

    audits: AuditRepository
    evaluations: EvaluationRepository
    action_plans: ActionPlanRepository
    weights: StandardWeightRepository
    users: UserDirectory
    standards: StandardDirectory
    maturity_levels: MaturityLevelDirectory

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
