"""화면 라우터 패키지"""
