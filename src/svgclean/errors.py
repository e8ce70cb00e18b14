# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Errors raised by svgclean.

Only the command line catches these; library code lets them propagate.
"""


class SvgCleanError(Exception):
    pass


class MalformedDocument(SvgCleanError, ValueError):
    """Input could not be parsed as well-formed XML."""


class MissingDependency(SvgCleanError, RuntimeError):
    """A module svgclean needs at runtime is not importable."""

    def __init__(self, module_name: str):
        super().__init__(
            f'"{module_name}" not found, please check your runtime dependency installation'
        )
        self.module_name = module_name
