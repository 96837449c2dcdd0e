"""
API v1 엔드포인트
"""
