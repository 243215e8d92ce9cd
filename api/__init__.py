"""
Circles API - FastAPI transport for the community graph.
"""
