"""
Utilities Package for the M3U Converter.

Modules:
    - format_utils.py: Helpers for formatting sizes and result counts in log
      messages, and the case-sensitive file extension check.
"""
