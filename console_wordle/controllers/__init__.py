"""
Controllers Package

Front ends over the game services: the terminal game and the HTTP API.
"""
