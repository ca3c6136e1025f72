"""WellQuant CLI."""
