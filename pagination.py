import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from memoizer import memoize_one_factory
from selection import clear_selection

logger = logging.getLogger(__name__)

SetProps = Callable[[dict], None]


class PageAction(Enum):
    NONE = "none"
    NATIVE = "native"
    CUSTOM = "custom"


class UnknownPageActionError(ValueError):
    pass


def last_page(rows, page_size: int) -> int:
    """Zero-based index of the final page; 0 for an empty row set."""
    return max(math.ceil(len(rows) / page_size) - 1, 0)


class Paginator(ABC):
    """Navigation surface shared by every pagination mode.

    Commands mutate ``page_current`` and hand the new index, together with
    a selection reset, to ``set_props``. Queries never have side effects.
    """

    last_page: Optional[int] = 0

    def __init__(self, page_current: int, set_props: Optional[SetProps]):
        self.page_current = page_current
        self._set_props = set_props

    def _commit(self):
        logger.debug("%s commit page_current=%s", type(self).__name__, self.page_current)
        self._set_props({"page_current": self.page_current, **clear_selection()})

    @abstractmethod
    def load_next(self):
        ...

    def load_previous(self):
        if self.page_current <= 0:
            return
        self.page_current -= 1
        self._commit()

    def load_first(self):
        self.page_current = 0
        self._commit()

    @abstractmethod
    def load_last(self):
        ...

    @abstractmethod
    def go_to_page(self, page: int):
        ...

    def has_previous(self) -> bool:
        return self.page_current != 0

    @abstractmethod
    def has_next(self) -> bool:
        ...

    @abstractmethod
    def has_last(self) -> bool:
        ...


class NoPaginator(Paginator):
    last_page = 0

    def __init__(self):
        super().__init__(0, None)

    def load_next(self):
        pass

    def load_previous(self):
        pass

    def load_first(self):
        pass

    def load_last(self):
        pass

    def go_to_page(self, page: int):
        pass

    def has_previous(self) -> bool:
        return False

    def has_next(self) -> bool:
        return False

    def has_last(self) -> bool:
        return False


class FrontEndPaginator(Paginator):
    """Pages over a row set held entirely in memory."""

    def __init__(self, page_current: int, page_size: int, set_props: SetProps, rows):
        super().__init__(page_current, set_props)
        self.page_size = page_size
        self.rows = rows

    @property
    def last_page(self) -> int:
        return last_page(self.rows, self.page_size)

    def load_next(self):
        if self.page_current >= self.last_page:
            return
        self.page_current += 1
        self._commit()

    def load_last(self):
        self.page_current = self.last_page
        self._commit()

    def go_to_page(self, page: int):
        # page numbers from the caller are 1-based
        page -= 1
        self.page_current = max(0, min(page, self.last_page))
        self._commit()

    def has_next(self) -> bool:
        return self.page_current != self.last_page

    def has_last(self) -> bool:
        return self.page_current != self.last_page

    @property
    def page_start(self) -> int:
        return self.page_current * self.page_size

    @property
    def page_end(self) -> int:
        return min(len(self.rows), self.page_start + self.page_size)


class BackEndPaginator(Paginator):
    """Pages over data served elsewhere; the page count may be unknown."""

    def __init__(self, page_current: int, set_props: SetProps, page_count: Optional[int]):
        super().__init__(page_current, set_props)
        # reported counts are 1-based, None/0 means unknown
        self.last_page = max(0, page_count - 1) if page_count else None

    def load_next(self):
        # the server decides whether a next page exists
        self.page_current += 1
        self._commit()

    def load_last(self):
        if not self.last_page:
            return
        self.page_current = self.last_page
        self._commit()

    def go_to_page(self, page: int):
        page -= 1
        self.page_current = max(page, 0)
        if self.last_page and page > self.last_page:
            self.page_current = self.last_page
        self._commit()

    def has_next(self) -> bool:
        return self.last_page is None or self.page_current != self.last_page

    def has_last(self) -> bool:
        if not self.last_page:
            return False
        return self.page_current != self.last_page


def get_paginator(
    page_action,
    page_current: int,
    page_size: int,
    page_count: Optional[int],
    set_props: SetProps,
    rows,
) -> Paginator:
    try:
        action = PageAction(page_action)
    except ValueError:
        raise UnknownPageActionError(f"Unknown pagination mode: '{page_action}'") from None

    if action is PageAction.NONE:
        return NoPaginator()
    if action is PageAction.NATIVE:
        return FrontEndPaginator(page_current, page_size, set_props, rows)
    return BackEndPaginator(page_current, set_props, page_count)


derive_paginator = memoize_one_factory(get_paginator)
