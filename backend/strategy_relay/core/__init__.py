"""
PURPOSE: Core error taxonomy for the Strategic Update Relay.
"""
