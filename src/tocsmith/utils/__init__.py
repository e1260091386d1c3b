"""Shared utilities for tocsmith."""
