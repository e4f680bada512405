"""
httpcat - a small HTTP client for the terminal.

Sends GET, POST, PUT and DELETE requests and prints the response status,
headers and a syntax-highlighted body.
"""

__version__ = "1.0.0"
__author__ = "httpcat contributors"
