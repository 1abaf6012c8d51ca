"""
labscape - turns declarative lab scenarios into Vagrantfiles
"""

__version__ = "0.3.0"
