"""
Configuration, persistence, security and error handling
"""
