import curses
import logging
import time

from grid_pane import GridPane
from navigation import NavigationController
from screen_layout import ScreenLayout
from status_bar import render_status

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, table_state):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(100)

        self.state = table_state
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.grid.init_colors()
        self.nav = NavigationController(table_state)

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0
        self._last_page = table_state.page_current

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _on_page_change(self):
        if self.state.page_current == self._last_page:
            return
        self._last_page = self.state.page_current
        self.grid.row_offset = 0
        self.grid.col_offset = 0
        if len(self.state.viewport) == 0 and self.state.page_current > 0:
            self._set_status("No more rows", 3)

    # ---------------- UI ----------------

    def status_context(self):
        msg = self.status_msg if time.time() < self.status_msg_until else None
        return {
            "status_msg": msg,
            "file_path": self.state.file_path,
            "page_action": self.state.page_action.value,
            "paginator": self.state.paginator,
            "page_start": self.state.page_offset,
            "page_rows": len(self.state.viewport),
            "pending_count": self.nav.pending_count,
        }

    def redraw(self):
        self.grid.draw(
            self.layout.table_win,
            self.state.viewport,
            first_row=self.state.page_offset,
            active_cell=self.state.active_cell,
        )

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(self.status_context(), w), w - 1)
        except curses.error:
            pass
        sw.noutrefresh()
        curses.doupdate()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch == -1:
                self.redraw()
                continue

            if ch in (3, ord("q")):
                break

            if ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
            elif not self.nav.handle_key(ch):
                logger.debug("unbound key %s", ch)

            self._on_page_change()
            self.redraw()
