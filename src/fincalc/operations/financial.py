'''
Financial formulas: time value of money, investment analysis, real estate,
loans, bonds, options, tax and retirement.

All computed in floats. Rates are decimals per period, so 6% is 0.06.
Inputs are validated before anything is computed.
'''

import math

from ..items import OperandDescriptor as D
from ..operation import formula
from ..util import DomainError


RATE_ITERATIONS = 100
RATE_TOLERANCE = 1e-10


# Time value of money

@formula('PMT', 'PMT',
         (D('PV', 'Present Value (loan amount)'),
          D('rate', 'Interest rate per period'),
          D('n', 'Number of periods')),
         description='Payment Calculation',
         example='$200,000 loan at 0.5% monthly for 360 months\n'
                 '  200000 0.005 360 PMT  ->  1199.10')
def payment(pv, rate, n):
    if n <= 0:
        raise DomainError('number of periods must be positive')
    if rate < 0:
        raise DomainError('interest rate cannot be negative')
    if rate == 0:
        return pv / n
    factor = math.pow(1 + rate, n)
    return pv * (rate * factor) / (factor - 1)


@formula('PV', 'PV',
         (D('PMT', 'Periodic payment amount'),
          D('rate', 'Interest rate per period'),
          D('n', 'Number of periods')),
         description='Present Value Calculation',
         example='$1,199.10 a month for 360 months at 0.5% monthly\n'
                 '  1199.10 0.005 360 PV  ->  200000')
def present_value(pmt, rate, n):
    if n <= 0:
        raise DomainError('number of periods must be positive')
    if rate < 0:
        raise DomainError('interest rate cannot be negative')
    if rate == 0:
        return pmt * n
    factor = math.pow(1 + rate, n)
    return pmt * (factor - 1) / (rate * factor)


@formula('FV', 'FV',
         (D('PV', 'Present Value (initial investment)'),
          D('rate', 'Interest rate per period'),
          D('n', 'Number of periods')),
         description='Future Value Calculation',
         example='$10,000 invested at 8% annual for 10 years\n'
                 '  10000 0.08 10 FV  ->  21589.25')
def future_value(pv, rate, n):
    if n < 0:
        raise DomainError('number of periods cannot be negative')
    if rate < -1:
        raise DomainError('interest rate cannot be less than -100%')
    return pv * math.pow(1 + rate, n)


def _payment_at(pv, rate, n):
    factor = math.pow(1 + rate, n)
    return pv * (rate * factor) / (factor - 1)


@formula('RATE', 'RATE',
         (D('PV', 'Present Value (loan amount)'),
          D('PMT', 'Periodic payment'),
          D('n', 'Number of periods')),
         description='Interest Rate Calculation',
         example='$200,000 loan, $1,199.10 payment, 360 months\n'
                 '  200000 1199.10 360 RATE  ->  0.005')
def interest_rate(pv, pmt, n):
    '''
    Solve PMT(pv, rate, n) == pmt for rate with Newton's method.

    Uses a forward difference for the derivative and keeps the guess
    within (0, 1).
    '''
    if n <= 0:
        raise DomainError('number of periods must be positive')
    if pv <= 0 or pmt <= 0:
        raise DomainError('PV and PMT must be positive')
    rate = 0.01
    h = 1e-8
    for _ in range(RATE_ITERATIONS):
        try:
            f = pmt - _payment_at(pv, rate, n)
            derivative = (pmt - _payment_at(pv, rate + h, n) - f) / h
        except (OverflowError, ZeroDivisionError):
            break
        if abs(derivative) < 1e-10:
            break
        guess = rate - f / derivative
        if abs(guess - rate) < RATE_TOLERANCE:
            return guess
        rate = guess
        if rate < 0:
            rate = 0.0001
        if rate > 1:
            rate = 0.99
    raise DomainError('could not converge to a solution')


@formula('NPER', 'NPER',
         (D('PV', 'Present Value (loan amount)'),
          D('PMT', 'Periodic payment'),
          D('rate', 'Interest rate per period')),
         description='Number of Periods Calculation',
         example='$200,000 loan, $1,199.10 payment, 0.5% monthly rate\n'
                 '  200000 1199.10 0.005 NPER  ->  360')
def number_of_periods(pv, pmt, rate):
    if pv <= 0 or pmt <= 0:
        raise DomainError('PV and PMT must be positive')
    if rate < 0:
        raise DomainError('interest rate cannot be negative')
    if rate == 0:
        n = pv / pmt
    else:
        minimum = pv * rate
        if pmt <= minimum:
            raise DomainError('payment too small - loan would never be '
                              'repaid (min: {!r})'.format(minimum))
        n = math.log(pmt / (pmt - minimum)) / math.log(1 + rate)
    if not math.isfinite(n) or n < 0:
        raise DomainError('result is undefined or invalid')
    return n


# Investment analysis

@formula('CAGR', 'CAGR',
         (D('BeginningValue', 'Initial investment or starting value'),
          D('EndingValue', 'Final value or current value'),
          D('Years', 'Number of years')),
         description='Compound Annual Growth Rate',
         example='$10,000 grows to $15,000 in 5 years\n'
                 '  10000 15000 5 CAGR  ->  0.0845')
def compound_annual_growth_rate(beginning, ending, years):
    if beginning <= 0:
        raise DomainError('beginning value must be positive')
    if ending <= 0:
        raise DomainError('ending value must be positive')
    if years <= 0:
        raise DomainError('years must be positive')
    return math.pow(ending / beginning, 1 / years) - 1


@formula('BEP', 'BEP',
         (D('FixedCosts', 'Total fixed costs (rent, salaries, etc.)'),
          D('PricePerUnit', 'Selling price per unit'),
          D('VariableCostPerUnit', 'Variable cost to produce one unit')),
         description='Break-Even Point',
         example='$50,000 fixed costs, $100 price, $60 variable cost\n'
                 '  50000 100 60 BEP  ->  1250 units')
def break_even_point(fixed_costs, price, variable_cost):
    if fixed_costs < 0:
        raise DomainError('fixed costs cannot be negative')
    if price <= 0:
        raise DomainError('price per unit must be positive')
    if variable_cost < 0:
        raise DomainError('variable cost cannot be negative')
    margin = price - variable_cost
    if margin <= 0:
        raise DomainError('price must be greater than variable cost')
    return fixed_costs / margin


@formula('PAYBACK', 'PAYBACK',
         (D('InitialInvestment', 'Upfront cost or investment amount'),
          D('AnnualCashFlow', 'Net cash received per year (assumed constant)')),
         description='Payback Period',
         example='$100,000 investment, $25,000 annual cash flow\n'
                 '  100000 25000 PAYBACK  ->  4 years')
def payback_period(investment, cash_flow):
    if investment <= 0:
        raise DomainError('initial investment must be positive')
    if cash_flow <= 0:
        raise DomainError('annual cash flow must be positive')
    return investment / cash_flow


@formula('PI', 'PI',
         (D('InitialInvestment', 'Upfront cost or investment amount'),
          D('PVFutureCashFlows', 'Present value of expected future cash flows')),
         description='Profitability Index',
         example='$100,000 investment, $120,000 PV of future cash flows\n'
                 '  100000 120000 PI  ->  1.2')
def profitability_index(investment, future_cash_flows):
    if investment <= 0:
        raise DomainError('initial investment must be positive')
    if future_cash_flows < 0:
        raise DomainError('PV of future cash flows cannot be negative')
    return future_cash_flows / investment


# Real estate

@formula('CAP', 'CAP',
         (D('PropertyValue', 'Current market value or purchase price'),
          D('NOI', 'Net Operating Income (annual)')),
         description='Capitalization Rate',
         example='$200,000 property with $15,000 annual NOI\n'
                 '  200000 15000 CAP  ->  0.075')
def cap_rate(property_value, noi):
    if property_value <= 0:
        raise DomainError('property value must be positive')
    return noi / property_value


@formula('NOI', 'NOI',
         (D('GrossIncome', 'Total rental income (annual)'),
          D('OpEx', 'Operating expenses (property tax, insurance, '
                    'maintenance)')),
         description='Net Operating Income',
         example='$30,000 gross income, $12,000 operating expenses\n'
                 '  30000 12000 NOI  ->  18000')
def net_operating_income(gross_income, expenses):
    return gross_income - expenses


@formula('CoC', 'CoC',
         (D('CashInvested', 'Total cash invested (down payment + closing '
                            'costs + repairs)'),
          D('AnnualCashFlow', 'Annual pre-tax cash flow (NOI - debt service)')),
         description='Cash-on-Cash Return',
         example='$50,000 invested, $4,000 annual cash flow\n'
                 '  50000 4000 CoC  ->  0.08')
def cash_on_cash(cash_invested, cash_flow):
    if cash_invested <= 0:
        raise DomainError('cash invested must be positive')
    return cash_flow / cash_invested


@formula('DSCR', 'DSCR',
         (D('AnnualDebtService', 'Total annual loan payments (principal + '
                                 'interest)'),
          D('NOI', 'Net Operating Income (annual)')),
         description='Debt Service Coverage Ratio',
         example='$18,000 annual debt service, $22,000 NOI\n'
                 '  18000 22000 DSCR  ->  1.222')
def debt_service_coverage(debt_service, noi):
    if debt_service <= 0:
        raise DomainError('annual debt service must be positive')
    return noi / debt_service


@formula('LTV', 'LTV',
         (D('PropertyValue', 'Appraised value or purchase price'),
          D('LoanAmount', 'Mortgage loan amount')),
         description='Loan-to-Value Ratio',
         example='$200,000 property, $160,000 loan\n'
                 '  200000 160000 LTV  ->  0.8')
def loan_to_value(property_value, loan):
    if property_value <= 0:
        raise DomainError('property value must be positive')
    if loan < 0:
        raise DomainError('loan amount cannot be negative')
    return loan / property_value


@formula('GRM', 'GRM',
         (D('GrossAnnualRent', 'Total annual rental income (before '
                               'expenses)'),
          D('PropertyPrice', 'Purchase price or current market value')),
         description='Gross Rent Multiplier',
         example='$24,000 annual rent, $200,000 property price\n'
                 '  24000 200000 GRM  ->  8.333')
def gross_rent_multiplier(rent, price):
    if rent <= 0:
        raise DomainError('gross annual rent must be positive')
    if price <= 0:
        raise DomainError('property price must be positive')
    return price / rent


@formula('ROI', 'ROI',
         (D('CostOfInvestment', 'Initial investment amount'),
          D('Gain', 'Current value or sale proceeds')),
         description='Return on Investment',
         example='Bought for $200,000, sold for $250,000\n'
                 '  200000 250000 ROI  ->  0.25')
def return_on_investment(cost, gain):
    if cost <= 0:
        raise DomainError('cost of investment must be positive')
    return (gain - cost) / cost


@formula('CFAT', 'CFAT',
         (D('CashFlowBeforeTaxes', 'Net cash flow before tax implications'),
          D('TaxLiability', 'Total tax owed on the investment')),
         description='Cash Flow After Taxes',
         example='$15,000 cash flow before taxes, $3,000 tax liability\n'
                 '  15000 3000 CFAT  ->  12000')
def cash_flow_after_taxes(cash_flow, tax):
    return cash_flow - tax


@formula('OER', 'OER',
         (D('GrossOperatingIncome', 'Effective gross income after vacancy '
                                    'losses'),
          D('OperatingExpenses', 'Total operating expenses (taxes, '
                                 'insurance, maintenance, etc.)')),
         description='Operating Expense Ratio',
         example='$80,000 gross operating income, $32,000 expenses\n'
                 '  80000 32000 OER  ->  0.4')
def operating_expense_ratio(income, expenses):
    if income <= 0:
        raise DomainError('gross operating income must be positive')
    if expenses < 0:
        raise DomainError('operating expenses cannot be negative')
    return expenses / income


@formula('VACANCY', 'VACANCY',
         (D('PotentialGrossIncome', 'Maximum rental income at 100% '
                                    'occupancy'),
          D('VacancyRate', 'Expected vacancy rate (as decimal, e.g., 0.05 '
                           'for 5%)')),
         description='Vacancy Loss',
         example='$100,000 potential gross income, 5% vacancy rate\n'
                 '  100000 0.05 VACANCY  ->  5000')
def vacancy_loss(income, rate):
    if income < 0:
        raise DomainError('potential gross income cannot be negative')
    if rate < 0 or rate > 1:
        raise DomainError('vacancy rate must be between 0 and 1')
    return income * rate


@formula('EGI', 'EGI',
         (D('VacancyLoss', 'Income lost due to vacancy and credit losses'),
          D('PotentialGrossIncome', 'Maximum rental income at 100% '
                                    'occupancy')),
         description='Effective Gross Income',
         example='$5,000 vacancy loss, $100,000 potential gross income\n'
                 '  5000 100000 EGI  ->  95000')
def effective_gross_income(loss, income):
    if income < 0:
        raise DomainError('potential gross income cannot be negative')
    if loss < 0:
        raise DomainError('vacancy loss cannot be negative')
    if loss > income:
        raise DomainError('vacancy loss cannot exceed potential gross income')
    return income - loss


@formula('PPSF', 'PPSF',
         (D('SquareFeet', 'Total square footage of the property'),
          D('PropertyPrice', 'Purchase price or current market value')),
         description='Price Per Square Foot',
         example='2,000 square feet, $300,000 property\n'
                 '  2000 300000 PPSF  ->  150')
def price_per_square_foot(square_feet, price):
    if square_feet <= 0:
        raise DomainError('square feet must be positive')
    if price <= 0:
        raise DomainError('property price must be positive')
    return price / square_feet


@formula('RPSF', 'RPSF',
         (D('SquareFeet', 'Rentable square footage'),
          D('AnnualRent', 'Total annual rental income')),
         description='Rent Per Square Foot',
         example='1,500 square feet, $36,000 annual rent\n'
                 '  1500 36000 RPSF  ->  24')
def rent_per_square_foot(square_feet, rent):
    if square_feet <= 0:
        raise DomainError('square feet must be positive')
    if rent < 0:
        raise DomainError('annual rent cannot be negative')
    return rent / square_feet


# Loans

@formula('REMBAL', 'REMBAL',
         (D('PV', 'Original loan amount'),
          D('Rate', 'Interest rate per period'),
          D('NPer', 'Total number of payment periods'),
          D('PaymentsMade', 'Number of payments already made')),
         description='Remaining Loan Balance',
         example='$200,000 at 0.5% monthly for 360 months, 60 payments made\n'
                 '  200000 0.005 360 60 REMBAL  ->  about 186109')
def remaining_balance(pv, rate, nper, payments_made):
    if rate <= 0:
        raise DomainError('interest rate must be positive')
    if nper <= 0:
        raise DomainError('number of periods must be positive')
    if payments_made < 0 or payments_made > nper:
        raise DomainError('payments made must be between 0 and total periods')
    if pv <= 0:
        raise DomainError('present value must be positive')
    payment = _payment_at(pv, rate, nper)
    grown = math.pow(1 + rate, payments_made)
    return pv * grown - payment * ((grown - 1) / rate)


@formula('TOTINT', 'TOTINT',
         (D('PV', 'Original loan amount'),
          D('PMT', 'Payment amount per period'),
          D('NPer', 'Total number of payment periods')),
         description='Total Interest Paid',
         example='$200,000 loan, $1,199.10 monthly payment, 360 months\n'
                 '  200000 1199.10 360 TOTINT  ->  231676')
def total_interest(pv, pmt, nper):
    if pv <= 0:
        raise DomainError('present value must be positive')
    if pmt <= 0:
        raise DomainError('payment must be positive')
    if nper <= 0:
        raise DomainError('number of periods must be positive')
    return pmt * nper - pv


@formula('APY', 'APY',
         (D('APR', 'Annual Percentage Rate (as decimal, e.g., 0.06 for 6%)'),
          D('CompoundingPeriods', 'Number of compounding periods per year')),
         description='APR to APY Conversion',
         example='6% APR compounded monthly\n'
                 '  0.06 12 APY  ->  0.0617')
def annual_percentage_yield(apr, periods):
    if apr < 0:
        raise DomainError('APR cannot be negative')
    if periods <= 0:
        raise DomainError('compounding periods must be positive')
    return math.pow(1 + apr / periods, periods) - 1


@formula('DTI', 'DTI',
         (D('GrossMonthlyIncome', 'Monthly income before taxes'),
          D('TotalMonthlyDebt', 'Sum of all monthly debt payments')),
         description='Debt-to-Income Ratio',
         example='$8,000 monthly income, $2,400 monthly debt payments\n'
                 '  8000 2400 DTI  ->  0.3')
def debt_to_income(income, debt):
    if income <= 0:
        raise DomainError('gross monthly income must be positive')
    if debt < 0:
        raise DomainError('total monthly debt cannot be negative')
    return debt / income


# Bonds

@formula('CY', 'CY',
         (D('CurrentPrice', 'Current market price of the bond'),
          D('AnnualCouponPayment', "Bond's annual interest payment")),
         description='Current Yield',
         example='$950 current price, $60 annual coupon\n'
                 '  950 60 CY  ->  0.0632')
def current_yield(price, coupon):
    if price <= 0:
        raise DomainError('current price must be positive')
    if coupon < 0:
        raise DomainError('annual coupon cannot be negative')
    return coupon / price


@formula('YTM', 'YTM',
         (D('CurrentPrice', 'Current market price of the bond'),
          D('FaceValue', 'Par value of the bond (typically $1,000)'),
          D('AnnualCoupon', 'Annual coupon payment'),
          D('YearsToMaturity', 'Years until bond matures')),
         description='Yield to Maturity (approximation)',
         example='$950 price, $1,000 face value, $60 coupon, 10 years\n'
                 '  950 1000 60 10 YTM  ->  0.0662')
def yield_to_maturity(price, face, coupon, years):
    if price <= 0:
        raise DomainError('current price must be positive')
    if face <= 0:
        raise DomainError('face value must be positive')
    if coupon < 0:
        raise DomainError('annual coupon cannot be negative')
    if years <= 0:
        raise DomainError('years to maturity must be positive')
    return (coupon + (face - price) / years) / ((face + price) / 2)


@formula('BONDPRICE', 'BONDPRICE',
         (D('FaceValue', 'Par value of the bond'),
          D('CouponRate', 'Coupon rate per period (e.g., 0.03 for 3% '
                          'semi-annual)'),
          D('YieldRate', 'Market yield rate per period'),
          D('Periods', 'Number of periods to maturity')),
         description='Bond Price',
         example='$1,000 face, 3% coupon, 2.5% yield, 20 periods\n'
                 '  1000 0.03 0.025 20 BONDPRICE  ->  1077.95')
def bond_price(face, coupon_rate, yield_rate, periods):
    if face <= 0:
        raise DomainError('face value must be positive')
    if coupon_rate < 0:
        raise DomainError('coupon rate cannot be negative')
    if yield_rate < 0:
        raise DomainError('yield rate cannot be negative')
    if periods <= 0:
        raise DomainError('periods must be positive')
    coupon = face * coupon_rate
    if yield_rate == 0:
        return coupon * periods + face
    discount = math.pow(1 + yield_rate, -periods)
    return coupon * (1 - discount) / yield_rate + face * discount


# Options

@formula('AOPT', 'AOPT',
         (D('StrikePrice', 'Strike price (capital at risk)'),
          D('Premium', 'Premium received'),
          D('Days', 'Days to expiration')),
         description='Annualized Option Return',
         example='Sell a $12.50 put for $0.26 premium, 10 days out\n'
                 '  12.50 0.26 10 AOPT  ->  0.7592')
def annualized_option_return(strike, premium, days):
    if strike <= 0:
        raise DomainError('strike price must be positive')
    if premium <= 0:
        raise DomainError('premium must be positive')
    if days <= 0:
        raise DomainError('days to expiration must be positive')
    return premium / days * 365 / strike


@formula('CCR', 'CCR',
         (D('StockCost', 'Cost basis of stock'),
          D('StrikePrice', 'Call strike price'),
          D('Premium', 'Call premium received'),
          D('Days', 'Days to expiration')),
         description='Covered Call Return',
         example='Stock bought at $50, $52 call sold for $1.50, 30 days\n'
                 '  50 52 1.50 30 CCR  ->  0.8517')
def covered_call_return(cost, strike, premium, days):
    if cost <= 0:
        raise DomainError('stock cost must be positive')
    if strike <= 0:
        raise DomainError('strike price must be positive')
    if premium < 0:
        raise DomainError('premium cannot be negative')
    if days <= 0:
        raise DomainError('days to expiration must be positive')
    return (premium + (strike - cost)) / cost * (365 / days)


# Tax and retirement

@formula('EFFTAX', 'EFFTAX',
         (D('TotalIncome', 'Gross income before taxes'),
          D('TotalTax', 'Sum of all taxes paid')),
         description='Effective Tax Rate',
         example='$100,000 income, $18,000 total tax paid\n'
                 '  100000 18000 EFFTAX  ->  0.18')
def effective_tax_rate(income, tax):
    if income <= 0:
        raise DomainError('total income must be positive')
    if tax < 0:
        raise DomainError('total tax cannot be negative')
    return tax / income


@formula('AFTAXRET', 'AFTAXRET',
         (D('PreTaxReturn', 'Investment return before taxes (as decimal)'),
          D('TaxRate', 'Applicable tax rate (as decimal, e.g., 0.25 for '
                       '25%)')),
         description='After-Tax Return',
         example='8% pre-tax return, 25% tax rate\n'
                 '  0.08 0.25 AFTAXRET  ->  0.06')
def after_tax_return(pre_tax_return, tax_rate):
    if tax_rate < 0 or tax_rate > 1:
        raise DomainError('tax rate must be between 0 and 1')
    return pre_tax_return * (1 - tax_rate)


@formula('RMD', 'RMD',
         (D('AccountBalance', 'Total retirement account value as of Dec 31'),
          D('DistributionPeriod', 'Life expectancy factor from IRS Uniform '
                                  'Lifetime Table')),
         description='Required Minimum Distribution',
         example='$500,000 balance, 25.6 distribution period (age 73)\n'
                 '  500000 25.6 RMD  ->  19531.25')
def required_minimum_distribution(balance, period):
    if balance < 0:
        raise DomainError('account balance cannot be negative')
    if period <= 0:
        raise DomainError('distribution period must be positive')
    return balance / period


TIME_VALUE = (payment, present_value, future_value, interest_rate,
              number_of_periods)

INVESTMENT = (compound_annual_growth_rate, break_even_point, payback_period,
              profitability_index)

REAL_ESTATE = (cap_rate, net_operating_income, cash_on_cash,
               debt_service_coverage, loan_to_value, gross_rent_multiplier,
               return_on_investment, cash_flow_after_taxes,
               operating_expense_ratio, vacancy_loss, effective_gross_income,
               price_per_square_foot, rent_per_square_foot)

LOANS = (remaining_balance, total_interest, annual_percentage_yield,
         debt_to_income)

BONDS = current_yield, yield_to_maturity, bond_price

OPTIONS = annualized_option_return, covered_call_return

TAX = effective_tax_rate, after_tax_return, required_minimum_distribution

OPERATIONS = TIME_VALUE + INVESTMENT + REAL_ESTATE + LOANS + BONDS + \
             OPTIONS + TAX

ALIASES = {
    payback_period: ('PBP',),
    vacancy_loss: ('VAC',),
    remaining_balance: ('BAL',),
    total_interest: ('TINT',),
    current_yield: ('YIELD',),
    bond_price: ('BPRC',),
    effective_tax_rate: ('ETR',),
    after_tax_return: ('ATR',),
}
