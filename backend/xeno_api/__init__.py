"""
Xeno marketing platform API
"""
