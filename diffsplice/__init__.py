"""
diffsplice: unified diff parsing and patch reconstruction for the desktop client.
"""

__version__ = "0.1.0"
