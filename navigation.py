import curses


class NavigationController:
    """Maps viewer keys onto paginator commands and the active cell.

    A numeric prefix before ``G`` jumps to that (1-based) page, vim style.
    """

    MAX_COUNT = 999999

    def __init__(self, state):
        self.state = state
        self.pending_count = None

    # ---------- numeric prefix ----------
    def push_digit(self, digit: int):
        if digit < 0 or digit > 9:
            return
        if self.pending_count is None:
            self.pending_count = digit
        else:
            self.pending_count = min(self.MAX_COUNT, self.pending_count * 10 + digit)

    def consume_count(self):
        count = self.pending_count
        self.pending_count = None
        return count

    # ---------- pages ----------
    def next_page(self):
        self.state.paginator.load_next()

    def prev_page(self):
        self.state.paginator.load_previous()

    def first_page(self):
        self.state.paginator.load_first()

    def last_page(self):
        self.state.paginator.load_last()

    def go_to_page(self, page: int):
        self.state.paginator.go_to_page(page)

    # ---------- cells ----------
    def _move_cell(self, d_row: int, d_col: int):
        view = self.state.viewport
        if len(view) == 0 or len(view.columns) == 0:
            return
        cell = self.state.active_cell
        if cell is None:
            # first move only activates the top-left cell
            row, col = 0, 0
        else:
            row = max(0, min(len(view) - 1, cell["row"] + d_row))
            col = max(0, min(len(view.columns) - 1, cell["column"] + d_col))
        self.state.set_props({"active_cell": {"row": row, "column": col}})

    def move_up(self):
        self._move_cell(-1, 0)

    def move_down(self):
        self._move_cell(1, 0)

    def move_left(self):
        self._move_cell(0, -1)

    def move_right(self):
        self._move_cell(0, 1)

    # ---------- dispatch ----------
    def handle_key(self, ch) -> bool:
        if ord("0") <= ch <= ord("9") and (ch != ord("0") or self.pending_count is not None):
            self.push_digit(ch - ord("0"))
            return True

        count = self.consume_count()

        if ch == ord("G"):
            if count is not None:
                self.go_to_page(count)
            else:
                self.last_page()
        elif ch == ord("g"):
            self.first_page()
        elif ch in (ord("n"), curses.KEY_NPAGE):
            self.next_page()
        elif ch in (ord("p"), curses.KEY_PPAGE):
            self.prev_page()
        elif ch in (ord("j"), curses.KEY_DOWN):
            self.move_down()
        elif ch in (ord("k"), curses.KEY_UP):
            self.move_up()
        elif ch in (ord("h"), curses.KEY_LEFT):
            self.move_left()
        elif ch in (ord("l"), curses.KEY_RIGHT):
            self.move_right()
        elif ch == 27:  # Esc
            self.state.clear_selection()
        else:
            return False
        return True
