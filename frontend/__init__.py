"""Streamlit page for the bilingual Plant Health Analyzer."""
