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


"""Closure and cancellation metadata records held by the Audit aggregate."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from ..value_objects import AuditStatus, UserId


@dataclass(frozen=True)
class NonConformitiesCount:
    """Non-conformity counts by severity.

    ``critical`` is reserved for a future severity tier and is always 0.
    """

    critical: int = 0
    major: int = 0
    minor: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"critical": self.critical, "major": self.major, "minor": self.minor}


@dataclass(frozen=True)
class ClosureStatistics:
    """Statistics computed over the active evaluations of an audit.

    Attributes:
        total_evaluations: Count of active evaluations.
        total_findings: Count of evaluations with a compliance status.
        non_conformities_count: Major/minor (and reserved critical) counts.
        conformities_percentage: Conforming share of findings, 2 decimals.
        requires_follow_up: True when any major or minor non-conformity exists.
    """

    total_evaluations: int
    total_findings: int
    non_conformities_count: NonConformitiesCount
    conformities_percentage: Decimal
    requires_follow_up: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_evaluations": self.total_evaluations,
            "total_findings": self.total_findings,
            "non_conformities_count": self.non_conformities_count.to_dict(),
            "conformities_percentage": str(self.conformities_percentage),
            "requires_follow_up": self.requires_follow_up,
        }


@dataclass(frozen=True)
class ClosureMetadata:
    """Closure record stored on the audit.

    Provisional while the audit is pending closure (``closed_at`` is then the
    request time); final once the audit is closed.
    """

    closed_at: datetime
    closed_by: UserId
    statistics: ClosureStatistics
    report_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "closed_at": self.closed_at.isoformat(),
            "closed_by": str(self.closed_by),
            "report_url": self.report_url,
        }
        data.update(self.statistics.to_dict())
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ClosureMetadata":
        """Rebuild closure metadata from its serialized form."""
        counts = data.get("non_conformities_count") or {}
        return ClosureMetadata(
            closed_at=datetime.fromisoformat(data["closed_at"]),
            closed_by=UserId(data["closed_by"]),
            statistics=ClosureStatistics(
                total_evaluations=int(data["total_evaluations"]),
                total_findings=int(data["total_findings"]),
                non_conformities_count=NonConformitiesCount(
                    critical=int(counts.get("critical", 0)),
                    major=int(counts.get("major", 0)),
                    minor=int(counts.get("minor", 0)),
                ),
                conformities_percentage=Decimal(str(data["conformities_percentage"])),
                requires_follow_up=bool(data["requires_follow_up"]),
            ),
            report_url=data.get("report_url"),
        )


@dataclass(frozen=True)
class CancellationMetadata:
    """Cancellation record; keeps the status the audit was cancelled from."""

    cancelled_at: datetime
    cancelled_by: UserId
    reason: str
    previous_status: AuditStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cancelled_at": self.cancelled_at.isoformat(),
            "cancelled_by": str(self.cancelled_by),
            "reason": self.reason,
            "previous_status": self.previous_status.value,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "CancellationMetadata":
        """Rebuild cancellation metadata from its serialized form."""
        return CancellationMetadata(
            cancelled_at=datetime.fromisoformat(data["cancelled_at"]),
            cancelled_by=UserId(data["cancelled_by"]),
            reason=data["reason"],
            previous_status=AuditStatus(data["previous_status"]),
        )
