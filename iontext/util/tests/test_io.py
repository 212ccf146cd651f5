#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of IONTEXT.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Test suite for exporting value trees as JSON or YAML.
"""
import json
import tempfile
import unittest
from pathlib import Path

import yaml
from seutil.io import Fmt

from iontext.parser import parse_str
from iontext.util.io import dump_value, infer_fmt_from_ext, load_value
from iontext.value import Field, IonInt, IonList, IonString, IonStruct


class TestIO(unittest.TestCase):
    """
    Tests for iontext.util.io functions.
    """

    def setUp(self) -> None:
        """
        Create a scratch directory and a sample document.
        """
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        self.value = parse_str('doc::{name: "demo", sizes: [1, 2], tag: t}')

    def tearDown(self) -> None:
        """
        Remove the scratch directory.
        """
        self.tmpdir.cleanup()

    def test_infer_fmt_from_ext(self):
        """
        Verify that formats are inferred from extensions.
        """
        self.assertIn("json", infer_fmt_from_ext(".json").exts)
        self.assertIn("yaml", infer_fmt_from_ext("yaml").exts)
        self.assertEqual(infer_fmt_from_ext(".zzz", Fmt.json), Fmt.json)
        with self.assertRaises(ValueError):
            infer_fmt_from_ext(".zzz")

    def test_dump_json(self):
        """
        Verify that a value is written as plain JSON data.
        """
        path = dump_value(self.value, self.root / "doc.json")
        with open(path, "rt") as f:
            data = json.load(f)
        self.assertEqual(data, {"name": "demo", "sizes": [1, 2], "tag": "t"})

    def test_dump_yaml(self):
        """
        Verify that a value is written as plain YAML data.
        """
        path = dump_value(self.value, self.root / "doc.yml")
        with open(path, "rt") as f:
            data = yaml.safe_load(f)
        self.assertEqual(data, {"name": "demo", "sizes": [1, 2], "tag": "t"})

    def test_load(self):
        """
        Verify that dumped data is read back without annotations.
        """
        path = dump_value(self.value, self.root / "doc.json")
        self.assertEqual(
            load_value(path),
            IonStruct(
                [
                    Field("name",
                          IonString("demo")),
                    Field("sizes",
                          IonList([IonInt(1),
                                   IonInt(2)])),
                    Field("tag",
                          IonString("t"))
                ]))


if __name__ == "__main__":
    unittest.main()
