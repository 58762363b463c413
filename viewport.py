import pandas as pd

from memoizer import memoize_one_factory
from pagination import PageAction


def get_viewport(page_action, page_current: int, page_size: int, rows):
    """Rows shown on screen for the current page.

    Only native pagination slices locally; with custom pagination the owner
    already holds just the served page, and with none everything is shown.
    """
    if PageAction(page_action) is not PageAction.NATIVE:
        return rows
    start = page_current * page_size
    end = start + page_size
    if isinstance(rows, pd.DataFrame):
        return rows.iloc[start:end]
    return rows[start:end]


derive_viewport = memoize_one_factory(get_viewport)
