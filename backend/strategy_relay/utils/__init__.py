"""
PURPOSE: Logging and time helpers for the Strategic Update Relay.
"""
