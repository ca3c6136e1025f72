"""WellQuant — calibrated well-colour density analysis for culture plates."""

__version__ = "0.1.0"
