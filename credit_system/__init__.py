"""
Credit System - Customer & Credit Management Service

A FastAPI-based microservice that registers customers and manages
the credits (loans) they request.
"""

__version__ = "0.1.0"
