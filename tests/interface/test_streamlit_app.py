"""Tests for the Streamlit app module."""

from decimal import Decimal
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models import (
    DebtOverview,
    DebtTrendPoint,
    DebtTypeBucket,
    ExpenseBreakdownItem,
    MonthStatus,
    NetWorthSummary,
    Period,
    SmartSuggestion,
    Summary,
    UserComparison,
)


def test_fetch_users_reads_repository(monkeypatch):
    """_fetch_users should return (id, name) pairs of real users."""
    repository = MagicMock()
    repository.fetch_users.return_value = [
        SimpleNamespace(id=2, name="Dana"),
        SimpleNamespace(id=3, name="Noam"),
    ]
    monkeypatch.setattr(app, "_repository", lambda: repository)

    assert app._fetch_users() == [(2, "Dana"), (3, "Noam")]


def test_load_months_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_months."""
    monkeypatch.setattr(app, "_fetch_months", lambda: ["2025-01"])

    assert app._load_months() == ["2025-01"]


def test_format_currency_handles_sign():
    """Negative values keep the sign before the symbol."""
    assert app._format_currency(Decimal("1234.5"), "₪") == "₪1,234.50"
    assert app._format_currency(Decimal("-20"), "$") == "-$20.00"


def test_period_options_include_current_and_next():
    """The current and next periods are always selectable."""
    options = app._period_options(["2024-11"], Period(2025, 1))

    assert options == ["2025-02", "2025-01", "2024-11"]


def test_resolve_user_id_maps_labels():
    """Profile labels map back to user ids, Family to None."""
    users = [(2, "Dana"), (3, "Noam")]

    assert app._resolve_user_id("Noam (#3)", users) == 3
    assert app._resolve_user_id(app.FAMILY_LABEL, users) is None


def test_prepare_donut_chart_data_groups_other():
    """Items beyond the top N are merged into Other."""
    items = [
        ExpenseBreakdownItem(name=f"Item {i}", value=Decimal(100 - i), type="x")
        for i in range(4)
    ]

    data, total = app._prepare_donut_chart_data(items, "$", max_categories=2)

    assert total == Decimal("394")
    assert [row["category"] for row in data] == ["Item 0", "Item 1", "Other"]
    assert data[2]["amount"] == 195.0
    assert data[0]["amount_label"] == "$100.00"
    assert data[0]["share_label"] == "25.4%"


def test_prepare_trend_and_comparison_data():
    """Trend points and comparisons flatten to long-form rows."""
    points = [
        DebtTrendPoint(
            period=Period(2025, 1),
            label="Jan 25",
            loan_payments=Decimal("100"),
            debt_payments=Decimal("20"),
        )
    ]
    rows = [
        UserComparison(
            user_id=1,
            name="Dana",
            income=Decimal("10"),
            expenses=Decimal("4"),
        )
    ]

    trend = app._prepare_trend_chart_data(points)
    comparison = app._prepare_comparison_chart_data(rows)

    assert [(r["series"], r["amount"]) for r in trend] == [
        ("Loan payments", 100.0),
        ("Debt payments", 20.0),
    ]
    assert [(r["kind"], r["amount"]) for r in comparison] == [
        ("Income", 10.0),
        ("Expenses", 4.0),
    ]


class _FakeBlock:
    def __init__(self, owner) -> None:
        self._owner = owner

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def metric(self, label, value, **_kwargs):
        self._owner.metrics[label] = value


class _FakeSidebar:
    def __init__(self, choices) -> None:
        self._choices = choices

    def selectbox(self, label, options, index=0, **_kwargs):
        return self._choices.get(label, options[index])


class _FakeStreamlit:
    def __init__(self, choices=None, button_pressed=False) -> None:
        self.sidebar = _FakeSidebar(choices or {})
        self.button_pressed = button_pressed
        self.metrics: dict[str, str] = {}
        self.messages: list[tuple[str, str]] = []
        self.charts = 0
        self.dataframe_payload = None
        self.cache_data = MagicMock()
        self.config_called = False

    def set_page_config(self, **kwargs):
        self.config_called = True

    def title(self, text):
        self.messages.append(("title", text))

    def subheader(self, text):
        self.messages.append(("subheader", text))

    def caption(self, text):
        self.messages.append(("caption", text))

    def info(self, text):
        self.messages.append(("info", text))

    def success(self, text):
        self.messages.append(("success", text))

    def warning(self, text):
        self.messages.append(("warning", text))

    def error(self, text):
        self.messages.append(("error", text))

    def write(self, text):
        self.messages.append(("write", text))

    def progress(self, value, text=None):
        self.messages.append(("progress", text))

    def button(self, label):
        return self.button_pressed

    def columns(self, count):
        return [_FakeBlock(self) for _ in range(count)]

    def altair_chart(self, chart, **_kwargs):
        self.charts += 1

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def _dashboard(is_setup: bool = True) -> dict:
    period = Period(2025, 1)
    return {
        "summary": Summary(
            total_income=Decimal("10000"),
            total_fixed_expenses=Decimal("3000"),
            net_cash_flow=Decimal("7000"),
        ),
        "overview": DebtOverview(
            total_debt=Decimal("5000"),
            total_monthly_payments=Decimal("200"),
            loan_count=0,
            debt_count=1,
            highest_interest_rate=Decimal("20"),
            highest_interest_item="Visa",
            average_interest_rate=Decimal("20.00"),
            debts_by_type={
                "Loans": DebtTypeBucket(),
                "Variable Debts": DebtTypeBucket(
                    count=1,
                    total=Decimal("5000"),
                    names=["Visa"],
                ),
            },
        ),
        "trends": [
            DebtTrendPoint(period, "Jan 25", Decimal("0"), Decimal("200"))
        ],
        "suggestion": SmartSuggestion(
            has_suggestion=False,
            suggestion_type="none",
            surplus=Decimal("0"),
            message="No surplus available.",
        ),
        "breakdown": [
            ExpenseBreakdownItem(name="Rent", value=Decimal("3000"), type="x")
        ],
        "status": MonthStatus(
            period=period,
            is_setup=is_setup,
            record_count=4 if is_setup else 0,
            dynamic_categories=1,
            static_categories=1,
            dynamic_set_count=1,
            dynamic_total_count=2,
            static_set_count=2,
            static_total_count=2,
            dynamic_progress=50,
            static_progress=100,
            overall_progress=75,
        ),
        "net_worth": NetWorthSummary(
            asset_total=Decimal("1000"),
            liability_total=Decimal("5000"),
            net_worth=Decimal("-4000"),
        ),
        "comparison": [
            UserComparison(1, "Dana", Decimal("10000"), Decimal("3000"))
        ],
        "currency_symbol": "₪",
    }


def _patch_loaders(monkeypatch, fake_st, dashboard, captured=None):
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_check_altair_dependencies", lambda: (True, None))
    monkeypatch.setattr(app, "_load_users", lambda: [(2, "Dana")])
    monkeypatch.setattr(app, "_load_months", lambda: ["2025-01"])
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)

    def _load_dashboard(period_key, user_id):
        if captured is not None:
            captured.append((period_key, user_id))
        return dashboard

    monkeypatch.setattr(app, "_load_dashboard", _load_dashboard)


def test_main_renders_dashboard(monkeypatch):
    """main should render KPIs, charts and the debt table."""
    fake_st = _FakeStreamlit(
        choices={"Profile": "Dana (#2)", "Month": "2025-01"}
    )
    captured: list[tuple[str, int | None]] = []
    _patch_loaders(monkeypatch, fake_st, _dashboard(), captured)

    app.main()

    assert fake_st.config_called
    assert captured == [("2025-01", 2)]
    assert fake_st.metrics["Income"] == "₪10,000.00"
    assert fake_st.metrics["Net Worth"] == "-₪4,000.00"
    assert ("info", "No surplus available.") in fake_st.messages
    assert fake_st.charts == 3
    table, kwargs = fake_st.dataframe_payload
    assert table[1]["Items"] == "Visa"
    assert kwargs["hide_index"] is True


def test_main_stops_on_missing_chart_dependencies(monkeypatch):
    """A broken numpy or pandas install is reported before loading data."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "pandas is installed incorrectly"),
    )
    load_users = MagicMock()
    monkeypatch.setattr(app, "_load_users", load_users)

    app.main()

    assert ("error", "pandas is installed incorrectly") in fake_st.messages
    load_users.assert_not_called()


def test_start_month_button_seeds_period(monkeypatch):
    """An empty month offers a button that seeds it."""
    fake_st = _FakeStreamlit(button_pressed=True)
    _patch_loaders(monkeypatch, fake_st, _dashboard(is_setup=False))
    started: list[str] = []

    def _start(period_key):
        started.append(period_key)
        return "Created empty month: January 2025 (4 records)"

    monkeypatch.setattr(app, "_start_month", _start)

    app.main()

    assert started == ["2025-01"]
    assert (
        "success",
        "Created empty month: January 2025 (4 records)",
    ) in fake_st.messages
    fake_st.cache_data.clear.assert_called_once()


def test_fetch_dashboard_skips_comparison_for_single_user(monkeypatch):
    """User comparison is only computed in the family view."""
    repository = MagicMock()
    monkeypatch.setattr(app, "_repository", lambda: repository)
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: MagicMock(trend_months=3, currency_symbol="$"),
    )
    comparison = MagicMock()
    monkeypatch.setattr(app, "GetUserComparisonUseCase", comparison)
    for name in (
        "GetSummaryUseCase",
        "GetDebtOverviewUseCase",
        "GetDebtTrendsUseCase",
        "GetSmartSuggestionUseCase",
        "GetExpenseBreakdownUseCase",
        "GetMonthStatusUseCase",
        "GetNetWorthSummaryUseCase",
    ):
        monkeypatch.setattr(app, name, MagicMock())

    single = app._fetch_dashboard("2025-01", 2)
    family = app._fetch_dashboard("2025-01", None)

    assert single["comparison"] == []
    assert single["currency_symbol"] == "$"
    comparison.return_value.execute.assert_called_once_with(Period(2025, 1))
    assert family["comparison"] is comparison.return_value.execute.return_value


def test_start_month_runs_use_case(monkeypatch):
    """_start_month should seed the parsed period."""
    use_case = MagicMock()
    use_case.return_value.execute.return_value = MagicMock(
        message="Created empty month: March 2025",
        created_count=6,
    )
    monkeypatch.setattr(app, "_repository", lambda: "repository")
    monkeypatch.setattr(app, "StartNewMonthUseCase", use_case)

    message = app._start_month("2025-03")

    use_case.return_value.execute.assert_called_once_with(Period(2025, 3))
    assert message == "Created empty month: March 2025 (6 records)"


def test_trend_labels_follow_period_order():
    """Trend rows keep the oldest period first."""
    points = [
        DebtTrendPoint(Period(2024, 12), "Dec 24", Decimal("1"), Decimal("0")),
        DebtTrendPoint(Period(2025, 1), "Jan 25", Decimal("1"), Decimal("0")),
    ]

    rows = app._prepare_trend_chart_data(points)

    assert [row["order"] for row in rows] == [0, 0, 1, 1]


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "expected"),
    [
        ({"ndarray": object}, {"Timestamp": object}, (True, None)),
        ({}, {"Timestamp": object}, (False, "numpy")),
        ({"ndarray": object}, {}, (False, "pandas")),
    ],
)
def test_check_altair_dependencies(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    expected,
):
    """Half-installed numpy or pandas builds are named in the message."""
    monkeypatch.setitem(sys.modules, "numpy", SimpleNamespace(**numpy_attrs))
    monkeypatch.setitem(sys.modules, "pandas", SimpleNamespace(**pandas_attrs))

    ok, message = app._check_altair_dependencies()

    expected_ok, expected_module = expected
    assert ok is expected_ok
    if expected_module is None:
        assert message is None
    else:
        assert message.startswith(expected_module)
