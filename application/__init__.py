"""
Application layer for the Workout Tracker API.

Contains the store port (application.ports) and the exceptions shared by
the infrastructure and API layers (application.exceptions).
"""
