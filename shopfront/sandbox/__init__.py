"""Shopfront browser sandbox (Streamlit)."""
