'''
Investment return calculators with a ticker price lookup.

This package estimates what a single equity or fund position returns over a
time horizon. The two calculators are pure functions over typed input
records; the price resolver is the only component that touches the network.

Usage:
  from investcalc.domain.types import EquityInputs
  from investcalc.engine.equity import evaluate_equity
  from investcalc.pricing.resolver import PriceResolver

  inputs = EquityInputs.from_raw(investment='10000', current_price='150',
                                 target_price='180', time_horizon_years='3')
  result = evaluate_equity(inputs)
  print(result.to_display())

  quote = PriceResolver().resolve('SHOP.TO')
'''
