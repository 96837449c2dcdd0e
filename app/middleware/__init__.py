"""
HTTP 미들웨어
"""
