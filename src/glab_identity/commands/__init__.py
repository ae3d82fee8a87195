"""
Command-line front end for glab-setup-git-identity.
"""
