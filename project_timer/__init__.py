"""Project Timer - sequential countdown across a list of projects"""

__version__ = "1.0.0"
