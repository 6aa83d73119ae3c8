"""ECDC case distribution dashboard (Streamlit)."""
