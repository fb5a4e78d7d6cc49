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


"""Domain services for the Audit domain."""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from .entities import (
    ActionPlan,
    ClosureStatistics,
    Evaluation,
    NonConformitiesCount,
)
from .exceptions import AuditCannotBeClosedError, AuditValidationError
from .repositories import ActionPlanRepository, EvaluationRepository
from .value_objects import (
    AuditId,
    ComplianceStatus,
    NormalizationMode,
    StandardId,
    round2,
    to_decimal,
)

logger = logging.getLogger(__name__)

MAX_WEIGHT = Decimal("100")
HUNDRED = Decimal("100")


def compute_closure_statistics(evaluations: Sequence[Evaluation]) -> ClosureStatistics:
    """Compute closure statistics over the active evaluations of an audit.

    Args:
        evaluations: Active evaluations of the audit.

    Returns:
        ClosureStatistics value object.

    Example:
        Evaluations classified [C, C, MAJ, MAJ, MIN, OBS, N/A] yield
        7 findings, 2 major, 1 minor and 28.57 percent conformity.
    """
    total_evaluations = len(evaluations)
    statuses = [e.compliance_status for e in evaluations if e.compliance_status is not None]
    total_findings = len(statuses)
    major = statuses.count(ComplianceStatus.MAJOR_NON_CONFORMITY)
    minor = statuses.count(ComplianceStatus.MINOR_NON_CONFORMITY)
    conforming = statuses.count(ComplianceStatus.CONFORMING)

    if total_findings > 0:
        percentage = round2(Decimal(conforming) * HUNDRED / Decimal(total_findings))
    else:
        percentage = round2(0)

    return ClosureStatistics(
        total_evaluations=total_evaluations,
        total_findings=total_findings,
        non_conformities_count=NonConformitiesCount(critical=0, major=major, minor=minor),
        conformities_percentage=percentage,
        requires_follow_up=major > 0 or minor > 0,
    )


def compute_progress(evaluations: Sequence[Evaluation]) -> Tuple[Decimal, Decimal]:
    """Compute (progress, total_score) for an audit.

    progress is the completed share of evaluations as a percentage;
    total_score is the mean score over completed evaluations only. Both are
    0 when there is nothing to count and both are rounded to 2 decimals.
    """
    total = len(evaluations)
    completed = [e for e in evaluations if e.is_completed]
    if total == 0:
        return round2(0), round2(0)

    progress = round2(Decimal(len(completed)) * HUNDRED / Decimal(total))
    if not completed:
        return progress, round2(0)
    score_sum = sum((to_decimal(e.score) for e in completed), Decimal("0"))
    return progress, round2(score_sum / Decimal(len(completed)))


class ClosureValidator:
    """Pre-closure checks for an audit.

    Runs the completeness, classification and remediation-coverage checks
    against the evaluations and action plans visible in the caller's unit of
    work. All failing checks are reported together in a single
    AuditCannotBeClosedError.
    """

    def __init__(
        self,
        evaluation_repo: EvaluationRepository,
        action_plan_repo: ActionPlanRepository,
    ) -> None:
        self._evaluation_repo = evaluation_repo
        self._action_plan_repo = action_plan_repo

    def validate_closure(self, audit_id: AuditId) -> List[Evaluation]:
        """Run all closure checks.

        Args:
            audit_id: Audit about to be closed.

        Returns:
            The active evaluations the checks ran against.

        Raises:
            AuditCannotBeClosedError: If any check fails.
        """
        evaluations = self._evaluation_repo.find_active_by_audit(audit_id)
        if not evaluations:
            raise AuditCannotBeClosedError(
                audit_id=str(audit_id),
                reason="there are no evaluations to close",
                has_evaluations=False,
            )

        incomplete = self.find_incomplete(evaluations)
        unclassified = self.find_unclassified(evaluations)
        unremediated = self.find_unremediated_majors(evaluations)

        reasons = []
        if incomplete:
            reasons.append(f"{len(incomplete)} evaluations sin completar")
        if unclassified:
            reasons.append(
                f"{len(unclassified)} evaluations without a compliance classification"
            )
        if unremediated:
            reasons.append(
                f"{len(unremediated)} major non-conformities without an approved "
                f"or in-progress action plan"
            )

        if reasons:
            logger.info("Closure checks failed for audit %s: %s", audit_id, reasons)
            raise AuditCannotBeClosedError(
                audit_id=str(audit_id),
                reason="; ".join(reasons),
                incomplete_count=len(incomplete),
                unclassified_count=len(unclassified),
                unremediated_evaluation_ids=[str(e.evaluation_id) for e in unremediated],
            )
        return evaluations

    @staticmethod
    def find_incomplete(evaluations: Sequence[Evaluation]) -> List[Evaluation]:
        return [e for e in evaluations if not e.is_completed]

    @staticmethod
    def find_unclassified(evaluations: Sequence[Evaluation]) -> List[Evaluation]:
        return [e for e in evaluations if e.compliance_status is None]

    def find_unremediated_majors(self, evaluations: Sequence[Evaluation]) -> List[Evaluation]:
        """Return major non-conformities lacking approved/in-progress plans."""
        majors = [e for e in evaluations if e.is_major_non_conformity()]
        if not majors:
            return []

        plans = self._action_plan_repo.find_by_evaluations(e.evaluation_id for e in majors)
        covered = {
            plan.evaluation_id for plan in plans if plan.covers_remediation()
        }
        return [e for e in majors if e.evaluation_id not in covered]

    def calculate_closure_statistics(self, audit_id: AuditId) -> ClosureStatistics:
        """Compute fresh closure statistics from the current evaluation set."""
        return compute_closure_statistics(
            self._evaluation_repo.find_active_by_audit(audit_id)
        )


@dataclass(frozen=True)
class WeightEntry:
    """One submitted standard weight before persistence."""

    standard_id: StandardId
    weight: Decimal
    justification: Optional[str] = None
    category: Optional[str] = None
    display_order: int = 0


class WeightNormalizer:
    """Normalization and validation of a submitted weight set."""

    @staticmethod
    def normalize(entries: Sequence[WeightEntry]) -> List[WeightEntry]:
        """Rescale weights so they sum to the number of entries.

        Relative proportions are preserved and each weight is rounded to two
        decimals. A zero total yields a uniform weight of 1.0.
        """
        if not entries:
            return []
        total = sum((entry.weight for entry in entries), Decimal("0"))
        if total == 0:
            return [replace(entry, weight=Decimal("1.00")) for entry in entries]

        factor = Decimal(len(entries)) / total
        return [replace(entry, weight=round2(entry.weight * factor)) for entry in entries]

    @staticmethod
    def validate(entries: Sequence[WeightEntry]) -> None:
        """Validate a (possibly normalized) weight set.

        Raises:
            AuditValidationError: On negative weights, a zero total,
                duplicate standards or weights above 100.
        """
        if any(entry.weight < 0 for entry in entries):
            raise AuditValidationError("Weights cannot be negative")

        total = sum((entry.weight for entry in entries), Decimal("0"))
        if total <= 0:
            raise AuditValidationError("At least one standard must have a weight above 0")

        standard_ids = [entry.standard_id for entry in entries]
        if len(standard_ids) != len(set(standard_ids)):
            raise AuditValidationError("Duplicate standards in the weight configuration")

        if max(entry.weight for entry in entries) > MAX_WEIGHT:
            raise AuditValidationError(
                "Weights must not exceed 100; use relative values such as 1.0, 1.5, 2.0"
            )

    @classmethod
    def prepare(
        cls,
        entries: Sequence[WeightEntry],
        mode: NormalizationMode,
    ) -> List[WeightEntry]:
        """Normalize (in AUTO mode) then validate a weight set."""
        prepared = cls.normalize(entries) if mode == NormalizationMode.AUTO else list(entries)
        cls.validate(prepared)
        return prepared


def mean_weight(entries: Sequence[WeightEntry]) -> Decimal:
    """Arithmetic mean of the entry weights (entries must be non-empty)."""
    total = sum((entry.weight for entry in entries), Decimal("0"))
    return total / Decimal(len(entries))

