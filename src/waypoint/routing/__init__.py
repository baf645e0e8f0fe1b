"""Routing — route configs, records, and route snapshots.

Configs are built once at startup; records and routes are value
snapshots produced per navigation.
"""
