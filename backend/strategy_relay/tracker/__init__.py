"""
PURPOSE: Issue tracker integration for the Strategic Update Relay.
"""

from .github_client import GITHUB_ACCEPT_HEADER, GitHubIssueClient, get_issue_client

__all__ = ["GITHUB_ACCEPT_HEADER", "GitHubIssueClient", "get_issue_client"]
