"""Streamlit page modules for the tanker loading log.

Each module exposes ``render(language)``; tanker_app_ui.py picks one per run.
"""
