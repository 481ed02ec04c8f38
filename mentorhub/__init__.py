"""MentorHub: a server-rendered mentor/mentee matching site."""

__version__ = "1.0.0"
