"""Domain logic, free of HTTP and storage concerns"""
