"""
Interfaces Layer

CLI adapter.
"""
