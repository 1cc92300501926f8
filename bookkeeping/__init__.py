"""Bookkeeping service: journal, trial balance, inventory costing, depreciation."""
