"""Composition root for the notification events API.

Wires the query engine into the query service so the API and
application layers only ever see ports.
"""
