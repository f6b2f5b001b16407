"""
Seed sources for an empty knowledge base (APMEX educational pages).
"""
from __future__ import annotations

from typing import Tuple

# (url, category)
INITIAL_APMEX_SOURCES: Tuple[Tuple[str, str], ...] = (
    ("https://www.apmex.com/ira-benefits-gold-ira-silver-ira", "gold_ira"),
    ("https://learn.apmex.com/learning-guide/what-was-the-1864-coinage-act/", "history"),
    ("https://learn.apmex.com/learning-guide/what-was-the-trillion-dollar-coin-proposal/", "monetary_policy"),
    ("https://learn.apmex.com/learning-guide/history/history-of-us-coins/", "history"),
    ("https://learn.apmex.com/learning-guide/history/die-struck-vs-die-cast-coins/", "manufacturing"),
    ("https://learn.apmex.com/learning-guide/history/london-gold-pool/", "history"),
    ("https://learn.apmex.com/learning-guide/history/washington-agreement-on-gold/", "history"),
    ("https://learn.apmex.com/learning-guide/history/gold-and-the-international-monetary-fund/", "monetary_policy"),
    ("https://learn.apmex.com/answers/what-are-gold-futures/", "trading"),
    ("https://learn.apmex.com/learning-guide/bullion/what-is-bullion/", "fundamentals"),
    ("https://learn.apmex.com/learning-guide/bullion/what-is-gold-bullion/", "fundamentals"),
    ("https://learn.apmex.com/answers/how-much-platinum-is-in-a-catalytic-converter/", "platinum"),
    ("https://learn.apmex.com/answers/what-is-palladium-used-for/", "palladium"),
    ("https://learn.apmex.com/learning-guide/history/history-of-palladium-prices/", "palladium"),
    ("https://learn.apmex.com/buying-guide/how-much-should-i-buy/", "buying_guide"),
    ("https://learn.apmex.com/buying-guide/what-should-i-buy/", "buying_guide"),
    ("https://learn.apmex.com/buying-guide/when-to-buy-gold-and-silver/", "buying_guide"),
    ("https://learn.apmex.com/buying-guide/why-buy-physical-gold-and-silver/", "buying_guide"),
    ("https://learn.apmex.com/investing-guide/platinum/is-todays-platinum-price-worth-it", "platinum"),
    ("https://learn.apmex.com/learning-guide/history/price-of-silver-today-and-throughout-history", "silver"),
    ("https://learn.apmex.com/learning-guide/history/silver-thursday-the-hunt-brothers-scheme/", "history"),
    ("https://learn.apmex.com/learning-guide/science/silver-and-green-technology/", "silver"),
    ("https://learn.apmex.com/learning-guide/silver-price-vs-gold-price-volatility/", "analysis"),
    ("https://learn.apmex.com/answers/what-is-fiat-currency/", "monetary_policy"),
    ("https://learn.apmex.com/learning-guide/history/history-of-gold-prices/", "gold"),
    ("https://learn.apmex.com/learning-guide/history/the-gold-standard-throughout-u-s-history/", "history"),
    ("https://learn.apmex.com/learning-guide/history/what-was-the-bretton-woods-agreement/", "history"),
    ("https://learn.apmex.com/learning-guide/precious-metals-exchange-traded-funds-etfs/", "investing"),
    ("https://www.apmex.com/storage/gold-and-silver-storage", "storage"),
    ("https://learn.apmex.com/investing-guide/gold/what-is-a-gold-ira/", "gold_ira"),
)
