"""Mutation operators, reports, options and output layout for mutation testing of Move code."""

__version__ = "1.0.0"