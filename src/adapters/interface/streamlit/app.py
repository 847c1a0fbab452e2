"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
import importlib
import math

import streamlit as st
import altair as alt

from src.application.use_cases.get_debt_overview import GetDebtOverviewUseCase
from src.application.use_cases.get_debt_trends import GetDebtTrendsUseCase
from src.application.use_cases.get_expense_breakdown import (
    GetExpenseBreakdownUseCase,
)
from src.application.use_cases.get_month_status import GetMonthStatusUseCase
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_smart_suggestion import (
    GetSmartSuggestionUseCase,
)
from src.application.use_cases.get_summary import GetSummaryUseCase
from src.application.use_cases.get_user_comparison import (
    GetUserComparisonUseCase,
)
from src.application.use_cases.list_months import ListMonthsUseCase
from src.application.use_cases.start_new_month import StartNewMonthUseCase
from src.domain.errors import PreconditionError
from src.domain.models import (
    DebtOverview,
    DebtTrendPoint,
    ExpenseBreakdownItem,
    MonthStatus,
    NetWorthSummary,
    Period,
    Scope,
    SmartSuggestion,
    Summary,
    UserComparison,
)
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger


FAMILY_LABEL = "Family"


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs."""
    numpy = importlib.import_module("numpy")
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed incorrectly (missing ndarray)."
    pandas = importlib.import_module("pandas")
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed incorrectly (missing Timestamp)."
    return True, None


def _repository():
    return build_ledger_repository()


def _fetch_users() -> list[tuple[int, str]]:
    """Fetch real users as (id, name) pairs."""
    return [(user.id, user.name) for user in _repository().fetch_users()]


@st.cache_data(show_spinner=False, ttl=60)
def _load_users() -> list[tuple[int, str]]:
    """Cached wrapper around _fetch_users for Streamlit sessions."""
    return _fetch_users()


def _fetch_months() -> list[str]:
    """Fetch period keys with records, newest first."""
    return [period.key for period in ListMonthsUseCase(_repository()).execute()]


@st.cache_data(show_spinner=False, ttl=60)
def _load_months() -> list[str]:
    """Cached wrapper around _fetch_months."""
    return _fetch_months()


def _fetch_dashboard(period_key: str, user_id: int | None) -> dict:
    """Fetch every view rendered on the dashboard for a scope."""
    repository = _repository()
    settings = build_settings()
    scope = Scope(period=Period.parse(period_key), user_id=user_id)
    return {
        "summary": GetSummaryUseCase(repository).execute(scope),
        "overview": GetDebtOverviewUseCase(repository).execute(user_id),
        "trends": GetDebtTrendsUseCase(
            repository,
            months=settings.trend_months,
        ).execute(user_id),
        "suggestion": GetSmartSuggestionUseCase(
            repository,
            currency_symbol=settings.currency_symbol,
        ).execute(scope),
        "breakdown": GetExpenseBreakdownUseCase(repository).execute(scope),
        "status": GetMonthStatusUseCase(repository).execute(scope),
        "net_worth": GetNetWorthSummaryUseCase(repository).execute(user_id),
        "comparison": (
            GetUserComparisonUseCase(repository).execute(scope.period)
            if scope.is_family
            else []
        ),
        "currency_symbol": settings.currency_symbol,
    }


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard(period_key: str, user_id: int | None) -> dict:
    """Cached wrapper around _fetch_dashboard."""
    return _fetch_dashboard(period_key, user_id)


def _start_month(period_key: str) -> str:
    """Seed a period and return the message to display."""
    result = StartNewMonthUseCase(_repository()).execute(
        Period.parse(period_key)
    )
    return f"{result.message} ({result.created_count} records)"


def _format_currency(value: Decimal, symbol: str) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _format_months(value: int | float) -> str:
    """Format a payoff horizon, which may be unbounded."""
    if value == math.inf:
        return "never"
    return f"{value} months"


def _period_options(months: Sequence[str], current: Period) -> list[str]:
    """Return selectable periods: the current one plus months with data."""
    options = list(months)
    if current.key not in options:
        options.insert(0, current.key)
    next_key = current.next().key
    if next_key not in options:
        options.insert(0, next_key)
    return sorted(options, reverse=True)


def _resolve_user_id(
    label: str,
    users: Sequence[tuple[int, str]],
) -> int | None:
    """Map a sidebar label to a user id, None for the family view."""
    for user_id, name in users:
        if f"{name} (#{user_id})" == label:
            return user_id
    return None


def _prepare_donut_chart_data(
    items: Sequence[ExpenseBreakdownItem],
    symbol: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Expense items, largest first.
        symbol: Currency symbol for labels.
        max_categories: Maximum items to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(items, key=lambda item: item.value, reverse=True)
    top_items = [(item.name, item.value) for item in sorted_items[:max_categories]]
    other_amount = sum(
        (item.value for item in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum(
        (item.value for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for name, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": _format_currency(amount, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _prepare_trend_chart_data(
    points: Sequence[DebtTrendPoint],
) -> list[dict[str, str | float]]:
    """Flatten trend points into long-form rows for a line chart."""
    data: list[dict[str, str | float]] = []
    for order, point in enumerate(points):
        for series, amount in (
            ("Loan payments", point.loan_payments),
            ("Debt payments", point.debt_payments),
        ):
            data.append(
                {
                    "label": point.label,
                    "order": order,
                    "series": series,
                    "amount": float(amount),
                }
            )
    return data


def _prepare_comparison_chart_data(
    rows: Sequence[UserComparison],
) -> list[dict[str, str | float]]:
    """Flatten per-user income and expenses for a grouped bar chart."""
    data: list[dict[str, str | float]] = []
    for row in rows:
        data.append({"user": row.name, "kind": "Income", "amount": float(row.income)})
        data.append(
            {"user": row.name, "kind": "Expenses", "amount": float(row.expenses)}
        )
    return data


def _render_kpis(summary: Summary, net_worth: NetWorthSummary, symbol: str) -> None:
    """Render the summary metrics."""
    income_col, expenses_col, net_col, worth_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(summary.total_income, symbol),
    )
    expenses_col.metric(
        "Expenses",
        _format_currency(summary.total_expenses, symbol),
    )
    net_col.metric(
        "Net Cash Flow",
        _format_currency(summary.net_cash_flow, symbol),
    )
    worth_col.metric(
        "Net Worth",
        _format_currency(net_worth.net_worth, symbol),
    )
    st.caption(
        f"Credit available {_format_currency(summary.total_credit_available, symbol)}"
        f" of {_format_currency(summary.total_credit_limit, symbol)}; "
        f"minimum payments due "
        f"{_format_currency(summary.total_minimum_payments_due, symbol)}"
    )


def _render_suggestion(suggestion: SmartSuggestion, symbol: str) -> None:
    """Render the smart suggestion card."""
    st.subheader("Smart Suggestion")
    if not suggestion.has_suggestion:
        st.info(suggestion.message)
        return
    st.success(suggestion.message)
    if suggestion.recommendation is not None:
        recommendation = suggestion.recommendation
        details = [
            "Extra payment "
            f"{_format_currency(recommendation.extra_payment, symbol)}",
            f"payoff in {_format_months(recommendation.months_to_payoff)}",
        ]
        if recommendation.interest_saved.is_finite():
            saved = _format_currency(recommendation.interest_saved, symbol)
            details.append(f"about {saved} interest saved")
        st.caption(" · ".join(details))
    if suggestion.investment is not None:
        investment = suggestion.investment
        st.caption(
            f"Investing {_format_currency(investment.monthly_surplus, symbol)}"
            f" monthly for {investment.months} months at "
            f"{investment.assumed_return} could grow to "
            f"{_format_currency(investment.projected_value, symbol)}."
        )
        for option in suggestion.options:
            st.write(f"{option.priority}. **{option.name}**: {option.description}")


def _render_month_status(status: MonthStatus) -> None:
    """Render setup progress and the start-new-month action."""
    st.subheader(f"Month Setup: {status.period.display()}")
    if not status.is_setup:
        st.warning("This month has no records yet.")
        if st.button("Start new month"):
            try:
                st.success(_start_month(status.period.key))
            except PreconditionError as exc:
                st.error(str(exc))
            st.cache_data.clear()
        return
    st.progress(
        status.static_progress / 100,
        text=(
            f"Static {status.static_set_count}/{status.static_total_count}"
        ),
    )
    st.progress(
        status.dynamic_progress / 100,
        text=(
            f"Dynamic {status.dynamic_set_count}/{status.dynamic_total_count}"
        ),
    )
    st.caption(f"Overall progress {status.overall_progress}%")


def _render_trend_chart(points: Sequence[DebtTrendPoint]) -> None:
    """Render loan and debt payments over recent periods."""
    st.subheader("Debt Payments Trend")
    data = _prepare_trend_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X(
            "label:N",
            sort=alt.SortField("order"),
            title=None,
        ),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_expense_chart(
    items: Sequence[ExpenseBreakdownItem],
    symbol: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of expenses."""
    st.subheader("Expense Breakdown")
    if not items:
        st.info("No expenses recorded for this month.")
        return
    data, _ = _prepare_donut_chart_data(items, symbol)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_user_comparison(rows: Sequence[UserComparison]) -> None:
    """Render income versus expenses per user."""
    if not rows:
        return
    st.subheader("Income vs Expenses by User")
    chart = alt.Chart(
        alt.Data(values=_prepare_comparison_chart_data(rows))
    ).mark_bar().encode(
        x=alt.X("user:N", title=None),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "kind:N",
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("user:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_debt_overview(overview: DebtOverview, symbol: str) -> None:
    """Render the debt overview table."""
    st.subheader("Debt Overview")
    st.caption(
        f"{overview.loan_count} loans and {overview.debt_count} debts · "
        f"average rate {overview.average_interest_rate}% · highest "
        f"{overview.highest_interest_rate}% "
        f"({overview.highest_interest_item or '—'})"
    )
    data = [
        {
            "Type": bucket,
            "Count": totals.count,
            "Balance": _format_currency(totals.total, symbol),
            "Items": ", ".join(totals.names),
        }
        for bucket, totals in overview.debts_by_type.items()
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Finance", layout="wide")
    st.title("Household Finance Dashboard")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    users = _load_users()
    labels = [FAMILY_LABEL] + [f"{name} (#{user_id})" for user_id, name in users]
    user_label = st.sidebar.selectbox("Profile", labels, index=0)
    user_id = _resolve_user_id(user_label, users)

    current = Period.current()
    period_key = st.sidebar.selectbox(
        "Month",
        _period_options(_load_months(), current),
        index=0,
        format_func=lambda key: Period.parse(key).display(),
    )
    get_usage_logger().info(
        f"Dashboard viewed: period={period_key}, profile={user_label}"
    )

    dashboard = _load_dashboard(period_key, user_id)
    symbol = dashboard["currency_symbol"]

    _render_kpis(dashboard["summary"], dashboard["net_worth"], symbol)
    _render_suggestion(dashboard["suggestion"], symbol)

    left, right = st.columns(2)
    with left:
        _render_month_status(dashboard["status"])
        _render_debt_overview(dashboard["overview"], symbol)
    with right:
        _render_expense_chart(dashboard["breakdown"], symbol)
    _render_trend_chart(dashboard["trends"])
    _render_user_comparison(dashboard["comparison"])


if __name__ == "__main__":  # pragma: no cover
    main()
