"""
Streamlit UI for the vocabulary trainer.
"""
