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


"""FastAPI application factory.

Run with ``uvicorn audit_engine.main:create_app --factory``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from audit_engine import __version__
from audit_engine.api.audits import audits_router, evaluations_router, register_exception_handlers
from audit_engine.config import Settings, configure_logging
from audit_engine.infra.persistence import create_db_engine, create_session_factory, init_schema

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the application and its database wiring.

    Args:
        settings: Explicit settings; read from the environment when omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
    init_schema(engine)

    app = FastAPI(title="Audit Engine", version=__version__)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_exception_handlers(app)
    app.include_router(audits_router, prefix=settings.api_prefix)
    app.include_router(evaluations_router, prefix=settings.api_prefix)

    logger.info("Audit Engine %s started, API under %s", __version__, settings.api_prefix)
    return app
