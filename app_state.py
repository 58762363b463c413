import math
from typing import Callable, Optional

import pandas as pd

from pagination import PageAction, derive_paginator
from selection import SELECTION_PROPS, clear_selection
from viewport import derive_viewport


PageSource = Callable[[int, int], pd.DataFrame]


class TableState:
    """Owns the table props and merges paginator commits into them.

    ``source`` serves pages for custom pagination: it is called with
    ``(page_current, page_size)`` and returns the rows of that page.
    """

    PROPS = {"page_action", "page_current", "page_size", "page_count", "df"} | set(
        SELECTION_PROPS
    )

    def __init__(
        self,
        df: pd.DataFrame,
        file_path: Optional[str] = None,
        page_action=PageAction.NATIVE,
        page_size: int = 250,
        page_count: Optional[int] = None,
        source: Optional[PageSource] = None,
    ):
        self.file_path = file_path
        self.page_action = PageAction(page_action)
        self.page_current = 0
        self.page_size = page_size
        self.page_count = page_count
        self.source = source

        self.active_cell: Optional[dict] = None
        self.start_cell: Optional[dict] = None
        self.end_cell: Optional[dict] = None
        self.selected_cells: list[dict] = []

        self._derive_paginator = derive_paginator()
        self._derive_viewport = derive_viewport()

        self.df = df if source is None else source(0, page_size)

    @classmethod
    def served(cls, full_df: pd.DataFrame, page_size: int, known_count: bool = True, **kwargs):
        """Build a custom-paginated state whose pages are sliced from full_df."""

        def fetch(page_current, size):
            start = page_current * size
            return full_df.iloc[start : start + size]

        page_count = max(1, math.ceil(len(full_df) / page_size)) if known_count else None
        return cls(
            full_df.iloc[0:0],
            page_action=PageAction.CUSTOM,
            page_size=page_size,
            page_count=page_count,
            source=fetch,
            **kwargs,
        )

    def set_props(self, props: dict):
        unknown = set(props) - self.PROPS
        if unknown:
            raise KeyError(f"Unknown table props: {sorted(unknown)}")
        page_changed = "page_current" in props and props["page_current"] != self.page_current
        for name, value in props.items():
            setattr(self, name, value)
        if page_changed and self.source is not None and "df" not in props:
            self.df = self.source(self.page_current, self.page_size)

    def clear_selection(self):
        self.set_props(clear_selection())

    @property
    def paginator(self):
        return self._derive_paginator(
            self.page_action,
            self.page_current,
            self.page_size,
            self.page_count,
            self.set_props,
            self.df,
        )

    @property
    def viewport(self) -> pd.DataFrame:
        return self._derive_viewport(
            self.page_action, self.page_current, self.page_size, self.df
        )

    @property
    def page_offset(self) -> int:
        """Absolute index of the first row in the viewport."""
        if self.page_action is PageAction.NONE:
            return 0
        return self.page_current * self.page_size
