"""
Currency pair model.

Value types and pure functions for currency pair identifiers: parsing,
formatting, comparison and list manipulation. No dependencies on exchanges,
storage or transport.
"""
