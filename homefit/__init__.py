# This project was developed with assistance from AI tools.
"""Mortgage affordability and property matching engine."""
