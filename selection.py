SELECTION_PROPS = ("active_cell", "start_cell", "end_cell", "selected_cells")


def clear_selection() -> dict:
    """Props that drop the active cell and any cell range selection."""
    return {
        "active_cell": None,
        "start_cell": None,
        "end_cell": None,
        "selected_cells": [],
    }
