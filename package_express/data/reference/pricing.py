"""
Pricing Configuration

Quote = width * height * length * weight / QUOTE_DIVISOR
"""

QUOTE_DIVISOR = 100
