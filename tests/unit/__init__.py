"""
Unit tests for PetTracker components.

AWS access is mocked with moto, so these tests run without credentials or
network access.
"""
