"""
Typed functions for each AeroFS API resource, handling request/response transformation.
"""
