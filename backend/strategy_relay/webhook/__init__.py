"""
PURPOSE: Webhook module for the Strategic Update Relay. Formats strategic updates into tracker issues.

Provides the action dispatcher and the text formatters used to build each issue.
"""
