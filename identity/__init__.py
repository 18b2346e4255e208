"""역할/사용자 데이터 모델과 조회 서비스, 환경별 스키마 마이그레이션."""

__version__ = "0.1.0"
