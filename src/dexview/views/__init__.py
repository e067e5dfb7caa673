"""View composition and memoized selectors."""

from dexview.views.composer import ViewComposer, filter_by_pair
from dexview.views.selectors import ViewSelector

__all__ = [
    "ViewComposer",
    "ViewSelector",
    "filter_by_pair",
]
