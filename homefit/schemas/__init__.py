# This project was developed with assistance from AI tools.
"""Value objects exchanged between the engine and its callers."""
