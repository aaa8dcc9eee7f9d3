"""Core definitions, interfaces, exceptions and value objects"""
