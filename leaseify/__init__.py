"""Leaseify — resource synchronization core for the property-management app."""
