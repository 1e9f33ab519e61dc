"""Serhat Soysal portfolio and technical blog, served with Streamlit."""

__version__ = "1.0.0"
