"""
웹 계층 패키지 (FastAPI)
"""
