"""
업비트 마켓 대시보드 핵심 패키지
- api: JSON API 라우터
- views: 서버 렌더링 화면
- services / repository / cache / database: 조회 및 저장 계층
"""

__version__ = "1.0.0"
