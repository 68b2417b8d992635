"""
Test package for the PetTracker application.

Test Organization:
    unit/: Unit tests for models, serialization and services
    conftest.py: Pytest configuration and shared fixtures
"""
