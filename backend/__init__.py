"""
Tip Time backend: tip calculation, form state and the HTTP API the page uses
"""
