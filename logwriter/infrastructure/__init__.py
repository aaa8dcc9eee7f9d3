"""
Infrastructure layer implementing the logger interface.
"""
