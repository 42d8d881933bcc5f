# Path: fin_ratio/ratio_engine/categories.py
"""
Category Registry

Static registry of ratio categories. Each category carries the fields
it asks for and the ratio definitions that form its compute operation.
The registry is built once at import time and never mutated.
"""

from types import MappingProxyType
from typing import List, Mapping

from constants import FieldKind

from .ratio_models import Category, FieldDefinition as F
from .ratio_definitions import (
    VALUATION_RATIOS,
    PROFITABILITY_RATIOS,
    LIQUIDITY_RATIOS,
    LEVERAGE_RATIOS,
    EFFICIENCY_RATIOS,
    MARKET_RATIOS,
    CASH_FLOW_RATIOS,
    INTRINSIC_RATIOS,
)


class UnknownCategoryError(KeyError):
    """Raised when a category key is not in the registry."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        available = ', '.join(CATEGORIES)
        return f"Unknown category '{self.key}'. Available: {available}"


_CATEGORY_LIST = [
    Category(
        key='valuation',
        title='Valuation Ratios',
        description=(
            'P/E, Forward P/E, P/B, EV/EBITDA, PEG, '
            'Dividend Yield, Earnings Yield'
        ),
        fields=(
            F('marketPrice', 'Market Price per Share'),
            F('eps', 'Earnings per Share (EPS)'),
            F('forecastEps', 'Forecast EPS'),
            F('bookValuePerShare', 'Book Value per Share'),
            F('marketCap', 'Market Capitalization'),
            F('revenue', 'Revenue'),
            F('operatingCashFlow', 'Operating Cash Flow'),
            F('enterpriseValue', 'Enterprise Value (EV)'),
            F('ebitda', 'EBITDA'),
            F('earningsGrowthRate',
              'Earnings Growth Rate (as decimal, e.g. 0.2)', step=0.01),
            F('annualDividendPerShare', 'Annual Dividend per Share'),
            F('sharePrice', 'Share Price (for Dividend Yield)'),
        ),
        ratios=tuple(VALUATION_RATIOS),
    ),
    Category(
        key='profitability',
        title='Profitability Ratios',
        description=(
            'Gross Margin, Operating Margin, Net Profit Margin, '
            'ROE, ROA, ROIC, ROCE'
        ),
        fields=(
            F('revenue', 'Revenue'),
            F('cogs', 'Cost of Goods Sold (COGS)'),
            F('operatingIncome', 'Operating Income'),
            F('netIncome', 'Net Income'),
            F('shareholdersEquity', "Shareholders' Equity"),
            F('totalAssets', 'Total Assets'),
            F('nopat', 'NOPAT (Net Operating Profit After Taxes)'),
            F('investedCapital', 'Invested Capital'),
            F('ebit', 'EBIT'),
            F('capitalEmployed', 'Capital Employed'),
        ),
        ratios=tuple(PROFITABILITY_RATIOS),
    ),
    Category(
        key='liquidity',
        title='Liquidity Ratios',
        description=(
            'Current Ratio, Quick Ratio, Cash Ratio, '
            'Operating Cash Flow Ratio'
        ),
        fields=(
            F('currentAssets', 'Current Assets'),
            F('currentLiabilities', 'Current Liabilities'),
            F('inventory', 'Inventory'),
            F('cashAndEquivalents', 'Cash & Cash Equivalents'),
            F('operatingCashFlow', 'Operating Cash Flow'),
        ),
        ratios=tuple(LIQUIDITY_RATIOS),
    ),
    Category(
        key='leverage',
        title='Leverage & Solvency',
        description=(
            'Debt-to-Equity, Debt-to-Assets, Equity Ratio, '
            'Interest Coverage, DSCR, Net Debt to EBITDA'
        ),
        fields=(
            F('totalDebt', 'Total Debt'),
            F('shareholdersEquity', "Shareholders' Equity"),
            F('totalAssets', 'Total Assets'),
            F('ebit', 'EBIT'),
            F('interestExpense', 'Interest Expense'),
            F('operatingIncome', 'Operating Income'),
            F('totalDebtService', 'Total Debt Service'),
            F('cash', 'Cash'),
            F('ebitda', 'EBITDA (optional for Net Debt/EBITDA)'),
        ),
        ratios=tuple(LEVERAGE_RATIOS),
    ),
    Category(
        key='efficiency',
        title='Efficiency / Activity Ratios',
        description=(
            'Asset Turnover, Inventory Turnover, Receivables Turnover, '
            'DSO, DIO, CCC'
        ),
        fields=(
            F('revenue', 'Revenue'),
            F('totalAssets', 'Total Assets'),
            F('avgInventory', 'Average Inventory'),
            F('cogs', 'Cost of Goods Sold (COGS)'),
            F('avgAccountsReceivable', 'Average Accounts Receivable'),
            F('accountsReceivable', 'Accounts Receivable (current)'),
            F('inventory', 'Inventory (current)'),
            F('daysPayablesOutstanding', 'Days Payables Outstanding (DPO)'),
        ),
        ratios=tuple(EFFICIENCY_RATIOS),
    ),
    Category(
        key='market',
        title='Market Performance & Risk',
        description='Beta, Alpha, Sharpe, Sortino, Treynor, Max Drawdown',
        fields=(
            F('covariance', 'Covariance (Stock, Market)'),
            F('varianceMarket', 'Variance (Market)'),
            F('actualReturn', 'Actual Return (decimal e.g. 0.12)'),
            F('expectedReturn', 'Expected Return (CAPM)'),
            F('returnVal', 'Return (decimal)'),
            F('riskFreeRate', 'Risk-Free Rate (decimal)'),
            F('stdDev', 'Standard Deviation'),
            F('downsideDeviation', 'Downside Deviation'),
            F('beta', 'Beta (optional)'),
            F('peakValue', 'Peak Value'),
            F('troughValue', 'Trough Value'),
        ),
        ratios=tuple(MARKET_RATIOS),
    ),
    Category(
        key='cashflow',
        title='Cash Flow & Dividend Sustainability',
        description=(
            'Free Cash Flow, FCF Yield, Dividend Payout, '
            'Dividend Coverage, Cash Flow to Debt'
        ),
        fields=(
            F('operatingCashFlow', 'Operating Cash Flow'),
            F('capitalExpenditures', 'Capital Expenditures'),
            F('marketCap', 'Market Capitalization'),
            F('dividends', 'Dividends'),
            F('netIncome', 'Net Income'),
            F('totalDebt', 'Total Debt'),
        ),
        ratios=tuple(CASH_FLOW_RATIOS),
    ),
    Category(
        key='intrinsic',
        title='Intrinsic Value Metrics',
        description='DCF, EVA, WACC',
        fields=(
            F('cfSeries', 'Cash Flows (comma-separated, CF1,CF2,...)',
              kind=FieldKind.NUMBER_LIST),
            F('discountRate', 'Discount Rate r (decimal)', step=0.001),
            F('nopat', 'NOPAT'),
            F('wacc', 'WACC (decimal)'),
            F('investedCapital', 'Invested Capital'),
            F('E', 'E (Equity)'),
            F('V', 'V (Total Value)'),
            F('Re', 'Cost of Equity (Re)'),
            F('D', 'Debt (D)'),
            F('Rd', 'Cost of Debt (Rd)'),
            F('taxRate', 'Tax Rate (decimal)', step=0.01),
        ),
        ratios=tuple(INTRINSIC_RATIOS),
    ),
]

CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {c.key: c for c in _CATEGORY_LIST}
)


def get_category(key: str) -> Category:
    """
    Look up a category by key.

    Args:
        key: Category key (case-insensitive, surrounding spaces ignored)

    Returns:
        Category

    Raises:
        UnknownCategoryError: If no category has that key
    """
    normalized = key.strip().lower() if isinstance(key, str) else key
    try:
        return CATEGORIES[normalized]
    except KeyError:
        raise UnknownCategoryError(key) from None


def list_categories() -> List[Category]:
    """Return all categories in registry order."""
    return list(CATEGORIES.values())


__all__ = [
    'CATEGORIES',
    'UnknownCategoryError',
    'get_category',
    'list_categories',
]
