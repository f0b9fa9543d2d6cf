"""
FastAPI application for WritWay.
"""
