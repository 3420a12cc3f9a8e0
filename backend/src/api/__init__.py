"""Versioned HTTP API routers"""
