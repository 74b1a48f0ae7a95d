"""App views package.

UI rendering layer for Streamlit application.
Pure rendering - no business logic or calculations.
"""

__all__ = ["colors", "common", "screener"]
