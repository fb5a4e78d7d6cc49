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


"""Engine and session factory construction."""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a synchronous engine for ``database_url``.

    SQLite connections are shared across threads; an in-memory SQLite
    database is pinned to a single connection so every session sees the
    same data.
    """
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    logger.info("Creating database engine for %s", database_url.split("@")[-1])
    return create_engine(database_url, echo=echo, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
    )


def init_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    # Register the mapped tables on Base.metadata.
    from . import models  # noqa: F401

    Base.metadata.create_all(engine)
