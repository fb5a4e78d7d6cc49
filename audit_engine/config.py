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


"""Environment driven settings and logging setup."""

import logging
import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///./audit_engine.db"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        database_url: SQLAlchemy database URL.
        log_level: Root logging level name.
        api_prefix: Prefix mounted in front of every route.
        sql_echo: Log emitted SQL statements.
    """

    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``AUDIT_ENGINE_*`` environment variables."""
        return cls(
            database_url=os.getenv("AUDIT_ENGINE_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.getenv("AUDIT_ENGINE_LOG_LEVEL", "INFO").upper(),
            api_prefix=os.getenv("AUDIT_ENGINE_API_PREFIX", "/api/v1").rstrip("/"),
            sql_echo=os.getenv("AUDIT_ENGINE_SQL_ECHO", "false").lower() in _TRUE_VALUES,
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
