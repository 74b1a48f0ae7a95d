"""App logic package.

State handling for the Streamlit page.
Pure Python - no Streamlit UI calls.
"""

__all__ = ["controller", "results"]
