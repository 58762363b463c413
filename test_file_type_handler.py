import os
import tempfile
import unittest

import pandas as pd

from file_type_handler import FileTypeHandler, UnsupportedFileTypeError


class FileTypeHandlerTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _path(self, name):
        return os.path.join(self.tmp.name, name)

    def test_rejects_unknown_extension(self):
        with self.assertRaises(UnsupportedFileTypeError):
            FileTypeHandler(self._path("table.txt"))

    def test_loads_csv(self):
        path = self._path("table.CSV")
        pd.DataFrame({"a": [1, 2, 3]}).to_csv(path, index=False)
        df = FileTypeHandler(path).load()
        self.assertEqual(list(df["a"]), [1, 2, 3])

    def test_loads_json_records(self):
        path = self._path("table.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write('[{"a": 1}, {"a": 2}]')
        df = FileTypeHandler(path).load()
        self.assertEqual(len(df), 2)

    def test_missing_or_empty_file_is_an_empty_table(self):
        self.assertTrue(FileTypeHandler(self._path("nope.csv")).load().empty)
        path = self._path("empty.csv")
        open(path, "w").close()
        self.assertTrue(FileTypeHandler(path).load().empty)


if __name__ == "__main__":
    unittest.main()
