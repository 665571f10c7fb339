"""Application package for the student records API.

This package exposes the controller, service, repository and model
modules used by the FastAPI application. It is intentionally
lightweight; individual modules contain the concrete implementations
and documentation.
"""
