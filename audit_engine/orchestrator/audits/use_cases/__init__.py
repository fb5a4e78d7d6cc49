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


"""Audit use cases."""

from .approve_closure import ApproveClosureUseCase
from .cancel_audit import CancelAuditUseCase
from .close_audit import CloseAuditUseCase
from .configure_weights import ConfigureWeightsUseCase
from .copy_weights import CopyWeightsUseCase
from .create_audit import CreateAuditUseCase
from .plan_audit import PlanAuditUseCase
from .queries import GetAuditUseCase, ListWeightsUseCase
from .request_closure import RequestClosureUseCase
from .start_audit import StartAuditUseCase
from .update_evaluation import CompleteEvaluationUseCase, UpdateEvaluationUseCase
from .update_progress import UpdateProgressUseCase

__all__ = [
    "ApproveClosureUseCase",
    "CancelAuditUseCase",
    "CloseAuditUseCase",
    "CompleteEvaluationUseCase",
    "ConfigureWeightsUseCase",
    "CopyWeightsUseCase",
    "CreateAuditUseCase",
    "GetAuditUseCase",
    "ListWeightsUseCase",
    "PlanAuditUseCase",
    "RequestClosureUseCase",
    "StartAuditUseCase",
    "UpdateEvaluationUseCase",
    "UpdateProgressUseCase",
]
