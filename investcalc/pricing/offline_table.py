"""
Offline price table for TSX listings.

The live provider's free tier does not serve Toronto-listed instruments, so a
small set of common ones ships with fixed demo prices. These are not market
data; quotes built from this table carry offline provenance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OfflineListing:
  price: float
  name: str

OFFLINE_PRICES: dict[str, OfflineListing] = {
    # Equities
    'SHOP.TO': OfflineListing(price=105.50, name='Shopify Inc.'),
    'RY.TO': OfflineListing(price=142.30, name='Royal Bank of Canada'),
    'TD.TO': OfflineListing(price=80.15, name='Toronto-Dominion Bank'),
    'ENB.TO': OfflineListing(price=51.20, name='Enbridge Inc.'),
    'CNR.TO': OfflineListing(price=165.40, name='Canadian National Railway'),
    'BNS.TO': OfflineListing(price=67.85, name='Bank of Nova Scotia'),
    'SU.TO': OfflineListing(price=52.60, name='Suncor Energy Inc.'),
    # ETFs
    'XEQT.TO': OfflineListing(price=30.25,
                              name='iShares Core Equity ETF Portfolio'),
    'VEQT.TO': OfflineListing(price=41.10,
                              name='Vanguard All-Equity ETF Portfolio'),
    'VFV.TO': OfflineListing(price=128.70,
                             name='Vanguard S&P 500 Index ETF'),
    'XIC.TO': OfflineListing(price=36.90,
                             name='iShares Core S&P/TSX Capped Composite ETF'),
    'ZSP.TO': OfflineListing(price=78.45, name='BMO S&P 500 Index ETF'),
    'XIU.TO': OfflineListing(price=35.60, name='iShares S&P/TSX 60 Index ETF'),
}
