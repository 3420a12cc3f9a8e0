"""Caller authentication and rate limiting"""
