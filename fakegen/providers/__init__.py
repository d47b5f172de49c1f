"""Faker capability registry."""
