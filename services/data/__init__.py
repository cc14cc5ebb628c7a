"""
services/data – Read-only documents shipped with the application.
"""
