"""Persistence layer: database wiring, column types and ORM models."""
