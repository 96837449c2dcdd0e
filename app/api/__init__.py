"""
REST API 패키지
"""
