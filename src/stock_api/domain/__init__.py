"""Domain layer for the stock API."""
