"""PAYE Calc - legacy vs reform PAYE comparison tools."""

__version__ = "0.1.0"
