"""
Core types shared by the registration service, stores and API server.
"""
