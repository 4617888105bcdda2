"""
PURPOSE: Strategic Update Relay, a webhook that turns strategic update payloads into GitHub issues.
"""
