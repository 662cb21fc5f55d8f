"""Shared helpers for the Streamlit pages."""
