"""US Stock Screener - AI curated US stock lists rendered with Streamlit."""

__version__ = "0.1.0"
