"""
Core configuration, constants, exceptions and shared clients
"""
