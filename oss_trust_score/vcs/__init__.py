"""
Collaborators for repository hosts and local version control.
"""

from oss_trust_score.vcs.git import GitClient, remove_working_tree, scratch_directory
from oss_trust_score.vcs.github import GitHubClient

__all__ = [
    "GitClient",
    "GitHubClient",
    "remove_working_tree",
    "scratch_directory",
]
