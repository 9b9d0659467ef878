"""Core constants and enums"""
