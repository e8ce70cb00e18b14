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

"""Strip editor metadata from svg, meant for use as a git clean filter.

Usage:
svgclean.py < drawing.svg
<cleaned svg dumped to stdout>

svgclean.py drawing.svg icons/*.svg
<each file cleaned in place>

Git setup:
git config filter.svgclean.clean svgclean
echo '*.svg filter=svgclean' >> .gitattributes
"""
from absl import app
from absl import flags
from absl import logging
import importlib.util
import os
import shutil
import sys
import tempfile
from svgclean.errors import MalformedDocument, MissingDependency, SvgCleanError
from svgclean.rules import EDITOR_METADATA_RULES


FLAGS = flags.FLAGS


flags.DEFINE_string(
    "output_file", "-", "Output SVG file when filtering stdin ('-' means stdout)"
)
flags.DEFINE_bool("list_rules", False, "Print the attribute removal rules and exit")


_RUNTIME_DEPENDENCIES = ("lxml",)


def check_runtime_dependencies(module_names=None):
    if module_names is None:
        module_names = _RUNTIME_DEPENDENCIES
    for name in module_names:
        if importlib.util.find_spec(name) is None:
            raise MissingDependency(name)


def _strip(data: bytes) -> bytes:
    # imported late so a missing lxml is reported by check_runtime_dependencies
    from svgclean.svg import strip

    return strip(data)


def _umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_file(path, data: bytes):
    """Replace the content of path by way of a temporary file beside it.

    The temporary file is gone on every exit path, including interruption.
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp = tempfile.NamedTemporaryFile(
        prefix=".svgclean.", suffix=".tmp", dir=directory, delete=False
    )
    try:
        with tmp:
            tmp.write(data)
        if os.path.exists(path):
            shutil.copymode(path, tmp.name)
        else:
            # what open() would have created
            os.chmod(tmp.name, 0o666 & ~_umask())
        os.replace(tmp.name, path)
    finally:
        if os.path.exists(tmp.name):
            os.unlink(tmp.name)


def clean_file(path) -> bool:
    """Clean a file in place; returns whether its content changed."""
    with open(path, "rb") as f:
        original = f.read()
    try:
        cleaned = _strip(original)
    except MalformedDocument as e:
        raise MalformedDocument(f"{path}: {e}") from e
    if cleaned == original:
        return False
    write_file(path, cleaned)
    return True


def _filter():
    cleaned = _strip(sys.stdin.buffer.read())
    if FLAGS.output_file == "-":
        sys.stdout.buffer.write(cleaned)
        sys.stdout.buffer.flush()
    else:
        write_file(FLAGS.output_file, cleaned)


def _convert(paths):
    # No rollback; files before a failure stay converted
    for path in paths:
        if clean_file(path):
            logging.info("Cleaned %s", path)
        else:
            logging.info("%s is already clean", path)


def _run(argv):
    paths = argv[1:]

    if FLAGS.list_rules:
        for rule in EDITOR_METADATA_RULES:
            print(f"{rule.xpath}\t{rule.description}")
        return 0

    if paths and FLAGS.output_file != "-":
        raise app.UsageError("--output_file only applies when filtering stdin")

    logging.info(
        "%s: Removing SVG non-necessary info and beautifying markup...",
        os.path.basename(argv[0]),
    )
    try:
        check_runtime_dependencies()
        if paths:
            _convert(paths)
        else:
            _filter()
    except (SvgCleanError, OSError) as e:
        logging.error("%s", e)
        return 1
    return 0


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
