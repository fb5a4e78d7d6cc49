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


"""Mapping of audit domain errors to HTTP responses.

Every mapped error renders as ``{"detail": {"error": code, "message": text}}``
plus error specific fields. Exceptions outside this table propagate.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from audit_engine.core.audits.exceptions import (
    AuditCannotBeClosedError,
    AuditValidationError,
    ForbiddenActionError,
    InvalidStateTransitionError,
    OptimisticLockError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def _response(status_code: int, error: str, exc, **extra) -> JSONResponse:
    detail = {"error": error, "message": exc.message}
    detail.update(extra)
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    return _response(
        status.HTTP_404_NOT_FOUND, "not_found", exc, resource=exc.resource
    )


async def _forbidden(request: Request, exc: ForbiddenActionError) -> JSONResponse:
    logger.warning("Forbidden %s on audit %s by %s", exc.action, exc.audit_id, exc.user_id)
    return _response(status.HTTP_403_FORBIDDEN, "forbidden", exc)


async def _invalid_transition(
    request: Request, exc: InvalidStateTransitionError
) -> JSONResponse:
    return _response(
        status.HTTP_409_CONFLICT,
        "invalid_state_transition",
        exc,
        current_state=exc.from_state,
        required_states=exc.required_states,
    )


async def _cannot_close(request: Request, exc: AuditCannotBeClosedError) -> JSONResponse:
    return _response(
        status.HTTP_409_CONFLICT,
        "audit_cannot_be_closed",
        exc,
        reason=exc.reason,
        **exc.to_details(),
    )


async def _version_conflict(request: Request, exc: OptimisticLockError) -> JSONResponse:
    return _response(status.HTTP_409_CONFLICT, "version_conflict", exc)


async def _validation(request: Request, exc: AuditValidationError) -> JSONResponse:
    return _response(status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error", exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``.

    Starlette resolves handlers along the exception's MRO, so the closure
    error wins over its validation base class.
    """
    app.add_exception_handler(ResourceNotFoundError, _not_found)
    app.add_exception_handler(ForbiddenActionError, _forbidden)
    app.add_exception_handler(InvalidStateTransitionError, _invalid_transition)
    app.add_exception_handler(AuditCannotBeClosedError, _cannot_close)
    app.add_exception_handler(OptimisticLockError, _version_conflict)
    app.add_exception_handler(AuditValidationError, _validation)
