"""
Coin-operated vending machine: coin bank, change making and purchases.
"""

__version__ = "1.0.0"
