"""Core franchise-management logic: models, valuation, economics and risk."""
