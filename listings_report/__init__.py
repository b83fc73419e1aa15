"""
Core package for the listings report application.

Submodules provide data loading, filtering, the report engine, and the
Streamlit rendering helpers that are orchestrated by the top-level `app.py`.
"""
