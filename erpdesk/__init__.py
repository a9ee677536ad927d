"""Order pricing and address catalog core for the ERP dashboard."""

__version__ = "1.0.0"
