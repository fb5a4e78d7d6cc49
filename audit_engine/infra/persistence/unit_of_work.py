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


"""SQLAlchemy unit of work."""

import logging
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from .repositories import (
    SqlAlchemyActionPlanRepository,
    SqlAlchemyAuditRepository,
    SqlAlchemyEvaluationRepository,
    SqlAlchemyMaturityLevelDirectory,
    SqlAlchemyStandardDirectory,
    SqlAlchemyStandardWeightRepository,
    SqlAlchemyUserDirectory,
)

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """One session and one transaction per ``with`` block.

    Anything not committed when the block exits is rolled back, including
    when the block raises. The same instance may be entered again for the
    next command; each entry opens a fresh session.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Optional[Session] = None

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        if self._session is not None:
            raise RuntimeError("Unit of work is already active")
        self._session = self._session_factory()
        self.audits = SqlAlchemyAuditRepository(self._session)
        self.evaluations = SqlAlchemyEvaluationRepository(self._session)
        self.action_plans = SqlAlchemyActionPlanRepository(self._session)
        self.weights = SqlAlchemyStandardWeightRepository(self._session)
        self.users = SqlAlchemyUserDirectory(self._session)
        self.standards = SqlAlchemyStandardDirectory(self._session)
        self.maturity_levels = SqlAlchemyMaturityLevelDirectory(self._session)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            if exc_type is not None:
                logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            self.rollback()
        finally:
            self._session.close()
            self._session = None

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
