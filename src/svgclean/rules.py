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

"""Which editor metadata gets stripped.

Each rule is an xpath selecting attribute nodes, evaluated with the
prefixes in svg_meta.RULE_NAMESPACES. Rules are independent deletions so
their order does not affect the result.
"""

from typing import NamedTuple, Tuple


class RemovalRule(NamedTuple):
    xpath: str
    description: str


def _namedview(attr_name: str) -> str:
    return f"/svg:svg/sodipodi:namedview/@{attr_name}"


EDITOR_METADATA_RULES: Tuple[RemovalRule, ...] = (
    # absolute paths leak the author's filesystem layout
    RemovalRule(
        "/svg:svg//@inkscape:export-filename",
        "Full path of the last exported picture",
    ),
    RemovalRule("/svg:svg//@inkscape:export-xdpi", "Horizontal export resolution"),
    RemovalRule("/svg:svg//@inkscape:export-ydpi", "Vertical export resolution"),
    RemovalRule("/svg:svg/@inkscape:version", "Inkscape version"),
    RemovalRule("/svg:svg/@sodipodi:docname", "Essentially the SVG filename"),
    RemovalRule(
        "/svg:svg/@inkscape:output_extension", "Output extension last saved with"
    ),
    RemovalRule(
        _namedview("inkscape:current-layer"),
        "Current working layer of the previous session",
    ),
    RemovalRule(_namedview("inkscape:zoom"), "Zoom level of the previous session"),
    RemovalRule(
        _namedview("inkscape:window-width"), "Window width in the previous session"
    ),
    RemovalRule(
        _namedview("inkscape:window-height"), "Window height in the previous session"
    ),
    RemovalRule(
        _namedview("inkscape:window-x"), "Window x location in the previous session"
    ),
    RemovalRule(
        _namedview("inkscape:window-y"), "Window y location in the previous session"
    ),
    RemovalRule(
        _namedview("inkscape:window-maximized"),
        "Window maximized status in the previous session",
    ),
    # purpose unknown, always dropped
    RemovalRule(_namedview("inkscape:cx"), "inkscape:cx"),
    RemovalRule(_namedview("inkscape:cy"), "inkscape:cy"),
    RemovalRule(_namedview("inkscape:snap-nodes"), "inkscape:snap-nodes"),
    RemovalRule(
        _namedview("inkscape:showpageshadow"), "Whether the page shadow is shown"
    ),
    RemovalRule(_namedview("showgrid"), "Whether the grid is shown"),
)
