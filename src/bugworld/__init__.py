"""Bug World - an artificial-life simulation of bugs and food on a plane."""

__version__ = "0.1.0"
