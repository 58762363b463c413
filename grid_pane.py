import curses
import pandas as pd


class GridPane:
    PAIR_CELL_ACTIVE = 1
    PAIR_HEADER = 2
    MAX_COL_WIDTH = 40

    def __init__(self):
        self.col_offset = 0
        self.row_offset = 0
        self._colors = False

    def init_colors(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_ACTIVE, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_CYAN, -1)
            self._colors = True
        except curses.error:
            self._colors = False

    @staticmethod
    def _cell_text(value) -> str:
        if value is None:
            return ""
        try:
            if pd.isna(value):
                return ""
        except (TypeError, ValueError):
            pass
        return str(value).replace("\n", " ")

    def col_widths(self, view: pd.DataFrame) -> list[int]:
        # page slice only; the full frame may be large
        widths = []
        for idx, col in enumerate(view.columns):
            max_len = len(str(col))
            for v in view.iloc[:, idx]:
                max_len = max(max_len, len(self._cell_text(v)))
            widths.append(min(self.MAX_COL_WIDTH, max_len + 2))
        return widths

    def visible_columns(self, widths: list[int], avail_w: int, active_col=None) -> tuple:
        if not widths:
            return ()
        if active_col is not None and active_col < self.col_offset:
            self.col_offset = active_col
        self.col_offset = max(0, min(self.col_offset, len(widths) - 1))

        while True:
            cols = []
            used = 0
            for c in range(self.col_offset, len(widths)):
                if cols and used + widths[c] + 1 > avail_w:
                    break
                used += widths[c] + 1
                cols.append(c)
            if active_col is None or active_col <= cols[-1] or self.col_offset >= active_col:
                return tuple(cols)
            self.col_offset += 1

    def adjust_row_viewport(self, active_row, visible_rows: int):
        if active_row is None:
            self.row_offset = 0
            return
        if active_row < self.row_offset:
            self.row_offset = active_row
        elif active_row >= self.row_offset + visible_rows:
            self.row_offset = active_row - visible_rows + 1

    def render_lines(self, view: pd.DataFrame, width: int, height: int, first_row: int = 0, active_cell=None):
        """Plain text lines for the page: header first, then one per row.

        Returns ``(lines, spans)`` where spans maps a line number to the
        ``(x, w)`` of the active cell on that line.
        """
        active_row = active_cell["row"] if active_cell else None
        active_col = active_cell["column"] if active_cell else None

        last_label = first_row + max(len(view) - 1, 0)
        row_w = max(3, len(str(last_label)) + 1)
        widths = self.col_widths(view)
        cols = self.visible_columns(widths, max(1, width - (row_w + 1)), active_col)

        header = " " * (row_w + 1) + " ".join(
            str(view.columns[c])[: widths[c] - 1].ljust(widths[c]) for c in cols
        )
        lines = [header[:width]]
        spans = {}

        body_h = max(0, height - 1)
        self.adjust_row_viewport(active_row, body_h)
        for r in range(self.row_offset, min(len(view), self.row_offset + body_h)):
            label = str(first_row + r).rjust(row_w)
            x = row_w + 1
            parts = []
            for c in cols:
                cell = self._cell_text(view.iat[r, c])[: widths[c] - 1].ljust(widths[c])
                if r == active_row and c == active_col:
                    spans[len(lines)] = (x, widths[c])
                parts.append(cell)
                x += widths[c] + 1
            lines.append(f"{label} {' '.join(parts)}"[:width])
        return lines, spans

    def draw(self, win, view: pd.DataFrame, first_row: int = 0, active_cell=None):
        win.erase()
        h, w = win.getmaxyx()
        if len(view.columns) == 0:
            self._addstr(win, 0, 0, "(empty table)", w)
            win.noutrefresh()
            return

        lines, spans = self.render_lines(view, w, h, first_row, active_cell)
        for y, line in enumerate(lines):
            attr = curses.color_pair(self.PAIR_HEADER) if (y == 0 and self._colors) else 0
            self._addstr(win, y, 0, line, w, attr)
            if y in spans:
                x, cw = spans[y]
                attr = curses.color_pair(self.PAIR_CELL_ACTIVE) if self._colors else curses.A_REVERSE
                self._addstr(win, y, x, line[x : x + cw], w, attr)
        win.noutrefresh()

    @staticmethod
    def _addstr(win, y, x, text, w, attr=0):
        try:
            win.addnstr(y, x, text, max(0, w - x - 1), attr)
        except curses.error:
            pass
