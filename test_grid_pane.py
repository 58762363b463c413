import unittest
import pandas as pd

from grid_pane import GridPane


class DummyWin:
    def __init__(self, h=24, w=120):
        self._h = h
        self._w = w
        self.writes = []

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.writes = []

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n], attr))

    def noutrefresh(self):
        pass


class GridPaneRenderTests(unittest.TestCase):
    def test_rows_are_labelled_with_absolute_indices(self):
        df = pd.DataFrame({"a": [1, 2, 3]})
        lines, _ = GridPane().render_lines(df, 80, 10, first_row=20)
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].strip().startswith("a"))
        self.assertTrue(lines[1].lstrip().startswith("20 "))
        self.assertTrue(lines[3].lstrip().startswith("22 "))

    def test_missing_values_render_blank(self):
        df = pd.DataFrame({"a": [None, "x"]})
        lines, _ = GridPane().render_lines(df, 80, 10)
        self.assertNotIn("None", lines[1])
        self.assertNotIn("nan", lines[1])

    def test_height_limits_rows_and_follows_active_cell(self):
        df = pd.DataFrame({"a": range(50)})
        grid = GridPane()
        lines, spans = grid.render_lines(df, 40, 6, active_cell={"row": 30, "column": 0})
        self.assertEqual(len(lines), 6)
        self.assertEqual(grid.row_offset, 26)
        self.assertIn(5, spans)

    def test_columns_scroll_to_active_cell(self):
        df = pd.DataFrame({f"column_{i}": [i] for i in range(30)})
        grid = GridPane()
        lines, spans = grid.render_lines(df, 60, 5, active_cell={"row": 0, "column": 25})
        self.assertGreater(grid.col_offset, 0)
        self.assertIn("column_25", lines[0])
        x, w = spans[1]
        self.assertEqual(lines[1][x : x + w].strip(), "25")

    def test_draw_empty_table(self):
        win = DummyWin()
        GridPane().draw(win, pd.DataFrame())
        self.assertEqual(win.writes[0][2], "(empty table)")

    def test_draw_writes_header_and_rows(self):
        win = DummyWin(10, 60)
        GridPane().draw(win, pd.DataFrame({"a": [1, 2]}), first_row=0)
        self.assertEqual([w[0] for w in win.writes], [0, 1, 2])


if __name__ == "__main__":
    unittest.main()
