"""Content model for Sitepress."""

from .models import Author, AuthorMeta, GithubProfile, Post, PostMeta, Site

__all__ = ["Author", "AuthorMeta", "GithubProfile", "Post", "PostMeta", "Site"]
