"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from vocab_app.pages.overview import render_overview_page
from vocab_app.pages.practice import render_practice_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Practice", render=render_practice_page),
    AppPage(title="Overview", render=render_overview_page),
]
