"""
deriva: detector de drift entre recursos declarados y el estado real.
"""

__version__ = "1.0.0"
