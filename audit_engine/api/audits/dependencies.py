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


"""FastAPI dependencies for audit routes."""

from typing import Optional

from fastapi import Header, HTTPException, Request, status

from audit_engine.core.audits.repositories import IdGenerator, UnitOfWork
from audit_engine.core.audits.value_objects import UserId
from audit_engine.infra.id_generator import UUIDv7Generator
from audit_engine.infra.persistence import SqlAlchemyUnitOfWork

_id_generator = UUIDv7Generator()


def get_unit_of_work(request: Request) -> UnitOfWork:
    """Return a unit of work bound to the application's session factory."""
    return SqlAlchemyUnitOfWork(request.app.state.session_factory)


def get_id_generator() -> IdGenerator:
    return _id_generator


def get_acting_user(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> UserId:
    """Resolve the acting user from the ``X-User-Id`` header.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "missing_user", "message": "X-User-Id header is required"},
        )
    try:
        return UserId(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_user", "message": str(exc)},
        ) from exc


def is_elevated(
    x_user_elevated: bool = Header(default=False, alias="X-User-Elevated"),
) -> bool:
    """True when the caller holds a role that may cancel any audit."""
    return x_user_elevated
