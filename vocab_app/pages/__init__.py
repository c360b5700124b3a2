"""
Streamlit pages.
"""
