# Path: fin_ratio/ratio_engine/ratio_definitions.py
"""
Ratio Definitions

Declarative ratio definitions for every category. Each ratio names its
inputs by field key; the ratio engine evaluates them in list order.

Definition keys:
    ratio_id            Machine identifier, unique within a category
    name                Display name (key of the computed mapping)
    formula             Human-readable formula
    numerator           Component reference (see below)
    denominator         Component reference, must be non-zero
    calculation_type    'division' (default) or a composite type
    scale_factor        Multiplier applied after division (e.g. 365)
    denominator_fallback  Used when the denominator is unavailable
    unless              ratio_id that, when computed, suppresses this one
    components          Inputs of a composite calculation

Component references:
    'revenue'                    -> input field
    '@pe_ratio'                  -> ratio computed earlier in the list
    ['currentAssets', '-inventory'] -> signed sum of references
"""

from constants import DAYS_PER_YEAR


# =================================================================
# VALUATION RATIOS - Price relative to fundamentals
# =================================================================
VALUATION_RATIOS = [
    {
        'ratio_id': 'pe_ratio',
        'name': 'P/E',
        'formula': 'Market Price / EPS',
        'numerator': 'marketPrice',
        'denominator': 'eps',
    },
    {
        'ratio_id': 'forward_pe',
        'name': 'Forward P/E',
        'formula': 'Market Price / Forecast EPS',
        'numerator': 'marketPrice',
        'denominator': 'forecastEps',
    },
    {
        'ratio_id': 'price_to_book',
        'name': 'P/B',
        'formula': 'Market Price / Book Value per Share',
        'numerator': 'marketPrice',
        'denominator': 'bookValuePerShare',
    },
    {
        'ratio_id': 'price_to_sales',
        'name': 'P/S (MarketCap/Revenue)',
        'formula': 'Market Capitalization / Revenue',
        'numerator': 'marketCap',
        'denominator': 'revenue',
    },
    {
        'ratio_id': 'price_to_cash_flow',
        'name': 'P/CF (MarketCap/OperatingCF)',
        'formula': 'Market Capitalization / Operating Cash Flow',
        'numerator': 'marketCap',
        'denominator': 'operatingCashFlow',
    },
    {
        'ratio_id': 'ev_to_ebitda',
        'name': 'EV/EBITDA',
        'formula': 'Enterprise Value / EBITDA',
        'numerator': 'enterpriseValue',
        'denominator': 'ebitda',
    },
    {
        'ratio_id': 'peg_ratio',
        'name': 'PEG (P/E ÷ Growth)',
        'formula': 'P/E / Earnings Growth Rate',
        'numerator': '@pe_ratio',
        'denominator': 'earningsGrowthRate',
    },
    {
        'ratio_id': 'dividend_yield',
        'name': 'Dividend Yield',
        'formula': 'Annual Dividend per Share / Share Price',
        'numerator': 'annualDividendPerShare',
        'denominator': 'sharePrice',
    },
    {
        'ratio_id': 'earnings_yield',
        'name': 'Earnings Yield',
        'formula': 'EPS / Market Price',
        'numerator': 'eps',
        'denominator': 'marketPrice',
    },
]

# =================================================================
# PROFITABILITY RATIOS - Ability to generate profits
# =================================================================
PROFITABILITY_RATIOS = [
    {
        'ratio_id': 'gross_margin',
        'name': 'Gross Margin',
        'formula': '(Revenue - COGS) / Revenue',
        'numerator': ['revenue', '-cogs'],
        'denominator': 'revenue',
    },
    {
        'ratio_id': 'operating_margin',
        'name': 'Operating Margin',
        'formula': 'Operating Income / Revenue',
        'numerator': 'operatingIncome',
        'denominator': 'revenue',
    },
    {
        'ratio_id': 'net_profit_margin',
        'name': 'Net Profit Margin',
        'formula': 'Net Income / Revenue',
        'numerator': 'netIncome',
        'denominator': 'revenue',
    },
    {
        'ratio_id': 'return_on_equity',
        'name': 'ROE (Return on Equity)',
        'formula': "Net Income / Shareholders' Equity",
        'numerator': 'netIncome',
        'denominator': 'shareholdersEquity',
    },
    {
        'ratio_id': 'return_on_assets',
        'name': 'ROA (Return on Assets)',
        'formula': 'Net Income / Total Assets',
        'numerator': 'netIncome',
        'denominator': 'totalAssets',
    },
    {
        'ratio_id': 'roic',
        'name': 'ROIC',
        'formula': 'NOPAT / Invested Capital',
        'numerator': 'nopat',
        'denominator': 'investedCapital',
    },
    {
        'ratio_id': 'roce',
        'name': 'ROCE',
        'formula': 'EBIT / Capital Employed',
        'numerator': 'ebit',
        'denominator': 'capitalEmployed',
    },
]

# =================================================================
# LIQUIDITY RATIOS - Ability to meet short-term obligations
# =================================================================
LIQUIDITY_RATIOS = [
    {
        'ratio_id': 'current_ratio',
        'name': 'Current Ratio',
        'formula': 'Current Assets / Current Liabilities',
        'numerator': 'currentAssets',
        'denominator': 'currentLiabilities',
    },
    {
        'ratio_id': 'quick_ratio',
        'name': 'Quick Ratio',
        'formula': '(Current Assets - Inventory) / Current Liabilities',
        'numerator': ['currentAssets', '-inventory'],
        'denominator': 'currentLiabilities',
    },
    {
        'ratio_id': 'cash_ratio',
        'name': 'Cash Ratio',
        'formula': 'Cash & Cash Equivalents / Current Liabilities',
        'numerator': 'cashAndEquivalents',
        'denominator': 'currentLiabilities',
    },
    {
        'ratio_id': 'operating_cash_flow_ratio',
        'name': 'Operating Cash Flow Ratio',
        'formula': 'Operating Cash Flow / Current Liabilities',
        'numerator': 'operatingCashFlow',
        'denominator': 'currentLiabilities',
    },
]

# =================================================================
# LEVERAGE & SOLVENCY RATIOS - Financial leverage and debt capacity
# =================================================================
LEVERAGE_RATIOS = [
    {
        'ratio_id': 'debt_to_equity',
        'name': 'Debt-to-Equity',
        'formula': "Total Debt / Shareholders' Equity",
        'numerator': 'totalDebt',
        'denominator': 'shareholdersEquity',
    },
    {
        'ratio_id': 'debt_to_assets',
        'name': 'Debt-to-Assets',
        'formula': 'Total Debt / Total Assets',
        'numerator': 'totalDebt',
        'denominator': 'totalAssets',
    },
    {
        'ratio_id': 'equity_ratio',
        'name': 'Equity Ratio',
        'formula': "Shareholders' Equity / Total Assets",
        'numerator': 'shareholdersEquity',
        'denominator': 'totalAssets',
    },
    {
        'ratio_id': 'interest_coverage',
        'name': 'Interest Coverage (EBIT/Interest)',
        'formula': 'EBIT / Interest Expense',
        'numerator': 'ebit',
        'denominator': 'interestExpense',
    },
    {
        'ratio_id': 'debt_service_coverage',
        'name': 'Debt Service Coverage Ratio',
        'formula': 'Operating Income / Total Debt Service',
        'numerator': 'operatingIncome',
        'denominator': 'totalDebtService',
    },
    {
        'ratio_id': 'net_debt_to_ebitda',
        'name': 'Net Debt / EBITDA',
        'formula': '(Total Debt - Cash) / EBITDA',
        'numerator': ['totalDebt', '-cash'],
        'denominator': 'ebitda',
    },
]

# =================================================================
# EFFICIENCY / ACTIVITY RATIOS - Asset utilization
# =================================================================
EFFICIENCY_RATIOS = [
    {
        'ratio_id': 'asset_turnover',
        'name': 'Asset Turnover',
        'formula': 'Revenue / Total Assets',
        'numerator': 'revenue',
        'denominator': 'totalAssets',
    },
    {
        'ratio_id': 'inventory_turnover',
        'name': 'Inventory Turnover',
        'formula': 'COGS / Average Inventory',
        'numerator': 'cogs',
        'denominator': 'avgInventory',
    },
    {
        'ratio_id': 'receivables_turnover',
        'name': 'Receivables Turnover',
        'formula': 'Revenue / Average Accounts Receivable',
        'numerator': 'revenue',
        'denominator': 'avgAccountsReceivable',
    },
    {
        'ratio_id': 'days_sales_outstanding',
        'name': 'DSO (Days Sales Outstanding)',
        'formula': f'(Accounts Receivable / Revenue) x {DAYS_PER_YEAR}',
        'numerator': 'accountsReceivable',
        'denominator': 'revenue',
        'scale_factor': DAYS_PER_YEAR,
    },
    {
        'ratio_id': 'days_inventory_outstanding',
        'name': 'DIO (Days Inventory Outstanding)',
        'formula': f'(Inventory / COGS) x {DAYS_PER_YEAR}',
        'numerator': 'inventory',
        'denominator': 'cogs',
        'scale_factor': DAYS_PER_YEAR,
    },
    {
        'ratio_id': 'cash_conversion_cycle',
        'name': 'Cash Conversion Cycle (CCC)',
        'formula': 'DSO + DIO - DPO',
        'numerator': [
            '@days_sales_outstanding',
            '@days_inventory_outstanding',
            '-daysPayablesOutstanding',
        ],
        'calculation_type': 'absolute',
    },
]

# =================================================================
# MARKET PERFORMANCE & RISK
# =================================================================
MARKET_RATIOS = [
    {
        'ratio_id': 'beta',
        'name': 'Beta (β)',
        'formula': 'Covariance(Stock, Market) / Variance(Market)',
        'numerator': 'covariance',
        'denominator': 'varianceMarket',
    },
    {
        'ratio_id': 'alpha',
        'name': 'Alpha (α)',
        'formula': 'Actual Return - Expected Return',
        'numerator': ['actualReturn', '-expectedReturn'],
        'calculation_type': 'absolute',
    },
    {
        'ratio_id': 'sharpe_ratio',
        'name': 'Sharpe Ratio',
        'formula': '(Return - Risk-Free Rate) / Standard Deviation',
        'numerator': ['returnVal', '-riskFreeRate'],
        'denominator': 'stdDev',
    },
    {
        'ratio_id': 'sortino_ratio',
        'name': 'Sortino Ratio',
        'formula': '(Return - Risk-Free Rate) / Downside Deviation',
        'numerator': ['returnVal', '-riskFreeRate'],
        'denominator': 'downsideDeviation',
    },
    {
        'ratio_id': 'treynor_ratio',
        'name': 'Treynor Ratio',
        'formula': '(Return - Risk-Free Rate) / Beta',
        'numerator': ['returnVal', '-riskFreeRate'],
        'denominator': '@beta',
        'denominator_fallback': 'beta',
    },
    {
        'ratio_id': 'maximum_drawdown',
        'name': 'Maximum Drawdown',
        'formula': '(Peak Value - Trough Value) / Peak Value',
        'numerator': ['peakValue', '-troughValue'],
        'denominator': 'peakValue',
    },
]

# =================================================================
# CASH FLOW & DIVIDEND SUSTAINABILITY
# =================================================================
CASH_FLOW_RATIOS = [
    {
        'ratio_id': 'free_cash_flow',
        'name': 'Free Cash Flow (FCF)',
        'formula': 'Operating Cash Flow - Capital Expenditures',
        'numerator': ['operatingCashFlow', '-capitalExpenditures'],
        'calculation_type': 'absolute',
    },
    {
        'ratio_id': 'fcf_yield',
        'name': 'FCF Yield',
        'formula': 'Free Cash Flow / Market Capitalization',
        'numerator': '@free_cash_flow',
        'denominator': 'marketCap',
    },
    {
        'ratio_id': 'dividend_payout',
        'name': 'Dividend Payout Ratio',
        'formula': 'Dividends / Net Income',
        'numerator': 'dividends',
        'denominator': 'netIncome',
    },
    {
        'ratio_id': 'dividend_coverage',
        'name': 'Dividend Coverage Ratio',
        'formula': 'Net Income / Dividends',
        'numerator': 'netIncome',
        'denominator': 'dividends',
    },
    {
        'ratio_id': 'cash_flow_to_debt',
        'name': 'Cash Flow to Debt Ratio',
        'formula': 'Operating Cash Flow / Total Debt',
        'numerator': 'operatingCashFlow',
        'denominator': 'totalDebt',
    },
]

# =================================================================
# INTRINSIC VALUE METRICS
# =================================================================
INTRINSIC_RATIOS = [
    {
        'ratio_id': 'dcf_present_value',
        'name': 'DCF (present value)',
        'formula': 'Sum of CF_t / (1 + r)^t, t = 1..n',
        'calculation_type': 'present_value',
        'components': ['cfSeries', 'discountRate'],
    },
    {
        'ratio_id': 'eva',
        'name': 'EVA',
        'formula': 'NOPAT - (WACC x Invested Capital)',
        'calculation_type': 'economic_value_added',
        'components': ['nopat', 'wacc', 'investedCapital'],
    },
    {
        'ratio_id': 'wacc_calculated',
        'name': 'WACC (calculated)',
        'formula': '(E/V x Re) + (D/V x Rd x (1 - Tax Rate))',
        'calculation_type': 'wacc',
        'components': ['E', 'V', 'Re', 'D', 'Rd', 'taxRate'],
    },
    {
        'ratio_id': 'wacc_input',
        'name': 'WACC (input)',
        'formula': 'WACC as supplied',
        'numerator': 'wacc',
        'calculation_type': 'absolute',
        'unless': 'wacc_calculated',
    },
]


__all__ = [
    'VALUATION_RATIOS',
    'PROFITABILITY_RATIOS',
    'LIQUIDITY_RATIOS',
    'LEVERAGE_RATIOS',
    'EFFICIENCY_RATIOS',
    'MARKET_RATIOS',
    'CASH_FLOW_RATIOS',
    'INTRINSIC_RATIOS',
]
