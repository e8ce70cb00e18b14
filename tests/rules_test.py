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

from lxml import etree
import pytest
from svgclean.rules import EDITOR_METADATA_RULES
from svgclean.svg_meta import RULE_NAMESPACES, prefixed_name


def test_rules_are_unique():
    xpaths = [r.xpath for r in EDITOR_METADATA_RULES]
    assert len(xpaths) == len(set(xpaths))


@pytest.mark.parametrize("rule", EDITOR_METADATA_RULES, ids=lambda r: r.xpath)
def test_rule_compiles(rule):
    etree.XPath(rule.xpath, namespaces=dict(RULE_NAMESPACES))
    assert rule.description


@pytest.mark.parametrize(
    "attr_name",
    [
        "inkscape:export-filename",
        "inkscape:export-xdpi",
        "inkscape:export-ydpi",
        "inkscape:version",
        "sodipodi:docname",
        "inkscape:output_extension",
        "inkscape:current-layer",
        "inkscape:zoom",
        "inkscape:window-width",
        "inkscape:window-height",
        "inkscape:window-x",
        "inkscape:window-y",
        "inkscape:window-maximized",
        "inkscape:cx",
        "inkscape:cy",
        "inkscape:snap-nodes",
        "inkscape:showpageshadow",
        "showgrid",
    ],
)
def test_rule_targets(attr_name):
    assert any(r.xpath.endswith(f"/@{attr_name}") for r in EDITOR_METADATA_RULES)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("{http://www.inkscape.org/namespaces/inkscape}zoom", "inkscape:zoom"),
        ("{http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd}docname", "sodipodi:docname"),
        ("showgrid", "showgrid"),
        ("{http://example.com/ns}thing", "{http://example.com/ns}thing"),
    ],
)
def test_prefixed_name(name, expected):
    assert prefixed_name(name) == expected
