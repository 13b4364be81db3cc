"""
Open Assets CLI

Command line front end for the Open Assets encoding layer.
"""

__version__ = '1.0.0'
