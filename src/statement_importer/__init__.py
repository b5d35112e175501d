"""
Japanese bank and card statement importer.

Converts statement exports into Date, Payee, Memo, Amount CSV files
for budgeting tools.
"""

__version__ = "1.0.0"
__description__ = "Normalize Japanese bank, card and e-money statements for budgeting tools"
