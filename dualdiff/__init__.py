"""Forward-mode automatic differentiation with nested dual numbers of any order."""

__version__ = "0.1.0"
__all__ = ["binomial", "dual", "derivatives", "trig", "explog"]