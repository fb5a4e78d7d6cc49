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


"""Helpers shared by audit use cases."""

from audit_engine.core.audits.entities import Audit
from audit_engine.core.audits.exceptions import AuditNotFoundError
from audit_engine.core.audits.repositories import UnitOfWork
from audit_engine.core.audits.value_objects import AuditId


def load_audit(uow: UnitOfWork, audit_id: AuditId, for_update: bool = False) -> Audit:
    """Fetch an active audit inside the current unit of work.

    Lifecycle commands pass ``for_update=True`` so the precondition checks
    and the mutation run against the same locked row.

    Raises:
        AuditNotFoundError: If the audit does not exist or is inactive.
    """
    audit = uow.audits.get(audit_id, for_update=for_update)
    if audit is None:
        raise AuditNotFoundError(str(audit_id))
    return audit
