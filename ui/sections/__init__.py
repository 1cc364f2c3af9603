"""One module per ExpenseFlow tab; each exposes ``render()``."""
