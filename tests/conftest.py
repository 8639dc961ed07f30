from __future__ import annotations

from datetime import date, time

import pytest

from baziengine.chinese import FourPillarsChart, compute_chart


@pytest.fixture
def chart_1979() -> FourPillarsChart:
    """Jia-Chen day master born in the Yin month (己未 丙寅 甲辰 丙寅)."""

    return compute_chart(date(1979, 2, 6), time(4, 0))
