"""GitHub REST API collaborators: repository identity, releases, assets."""
