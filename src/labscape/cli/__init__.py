"""
labscape Command Line Interface
"""
