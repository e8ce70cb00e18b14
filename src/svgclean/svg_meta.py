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

from types import MappingProxyType
from lxml import etree  # pytype: disable=import-error
from typing import Optional, Tuple


def svgns():
    return "http://www.w3.org/2000/svg"


def xlinkns():
    return "http://www.w3.org/1999/xlink"


def inkscapens():
    return "http://www.inkscape.org/namespaces/inkscape"


def sodipodins():
    return "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"


def xmlns():
    return "http://www.w3.org/XML/1998/namespace"


# Prefixes usable in removal rule xpaths, independent of whatever
# prefixes a given document happens to declare
RULE_NAMESPACES = MappingProxyType(
    {
        "svg": svgns(),
        "xlink": xlinkns(),
        "inkscape": inkscapens(),
        "sodipodi": sodipodins(),
    }
)


def splitns(name) -> Tuple[Optional[str], str]:
    qn = etree.QName(name)
    return qn.namespace, qn.localname


def xml_space_attr() -> str:
    return f"{{{xmlns()}}}space"


def prefixed_name(name: str) -> str:
    """Render a {ns}local name with the conventional prefix, if we know one.

    Used for log output; lxml reports attribute names in Clark notation.
    """
    ns, local = splitns(name)
    if ns is None:
        return local
    for prefix, uri in RULE_NAMESPACES.items():
        if uri == ns:
            return f"{prefix}:{local}"
    return name
