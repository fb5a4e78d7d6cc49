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


"""Audit command DTOs."""

from .approve_closure import ApproveClosureCommand
from .cancel_audit import CancelAuditCommand
from .close_audit import CloseAuditCommand
from .configure_weights import ConfigureWeightsCommand
from .copy_weights import CopyWeightsCommand
from .create_audit import CreateAuditCommand
from .plan_audit import PlanAuditCommand
from .request_closure import RequestClosureCommand
from .start_audit import StartAuditCommand
from .update_evaluation import CompleteEvaluationCommand, UpdateEvaluationCommand
from .update_progress import UpdateProgressCommand

__all__ = [
    "ApproveClosureCommand",
    "CancelAuditCommand",
    "CloseAuditCommand",
    "CompleteEvaluationCommand",
    "ConfigureWeightsCommand",
    "CopyWeightsCommand",
    "CreateAuditCommand",
    "PlanAuditCommand",
    "RequestClosureCommand",
    "StartAuditCommand",
    "UpdateEvaluationCommand",
    "UpdateProgressCommand",
]
